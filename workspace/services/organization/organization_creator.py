"""
Organization creation sequence.

Save the record, then provision the all-users group, the developers group
and the creator's admin membership, strictly in that order. The steps are
separate writes without a transaction: if a provisioning step fails, the
organization stays ACTIVE with partial setup and the error propagates.
"""

import logging
from typing import Optional

from common.utils.exceptions import InvalidParameterException
from workspace.schemas import MemberRole, Organization, OrganizationState
from workspace.services.base import GroupProvisioner, MemberDirectory, OrganizationStore

logger = logging.getLogger(__name__)


class OrganizationCreator:
    """Persists a new organization and runs its provisioning steps."""

    def __init__(
        self,
        repository: OrganizationStore,
        group_service: GroupProvisioner,
        member_service: MemberDirectory,
    ):
        self._repository = repository
        self._group_service = group_service
        self._member_service = member_service

    async def create(self, organization: Optional[Organization], creator_id: str) -> Organization:
        """
        Create an organization with the creator as admin.

        Args:
            organization: New organization, without an id
            creator_id: User who becomes ADMIN

        Returns:
            The persisted organization, after all provisioning steps

        Raises:
            InvalidParameterException: If organization is None or already has an id
        """
        if organization is None or (organization.id and organization.id.strip()):
            raise InvalidParameterException("organization")

        organization.state = OrganizationState.ACTIVE
        new_org = await self._repository.save(organization)

        try:
            await self._group_service.create_all_users_group(new_org.id)
            await self._group_service.create_dev_group(new_org.id)
            await self._member_service.add_member(new_org.id, creator_id, MemberRole.ADMIN)
        except Exception as e:
            logger.error(f"Org {new_org.id} saved but provisioning failed, left partially set up: {e}")
            raise

        logger.info(f"Created organization {new_org.id} ({new_org.name}) by user {creator_id}")
        return new_org
