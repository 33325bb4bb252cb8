"""
Organization service.

Public surface of the organization lifecycle: bootstrap, creation, lookup,
logo and settings management, partial updates and soft deletion.

Errors from any step propagate unchanged and nothing already written is
undone. Lookups only ever return ACTIVE organizations.
"""

import logging
from typing import Any, AsyncIterator, Dict, Iterable, Optional

from fastapi import UploadFile

from common.events import EventBus
from common.utils.exceptions import NotFoundException
from workspace.schemas import (
    OrgDeletedEvent,
    Organization,
    OrganizationState,
    OrganizationUpdate,
    WorkspaceUser,
)
from workspace.services.base import OrganizationStore
from workspace.services.organization.bootstrap_service import BootstrapService
from workspace.services.organization.logo_manager import LogoManager
from workspace.services.organization.organization_creator import OrganizationCreator
from workspace.services.organization.settings_store import SettingsStore

logger = logging.getLogger(__name__)


class OrganizationService:
    """
    Manages the organization lifecycle.
    """

    def __init__(
        self,
        repository: OrganizationStore,
        creator: OrganizationCreator,
        bootstrap: BootstrapService,
        logo_manager: LogoManager,
        settings_store: SettingsStore,
        event_bus: EventBus,
    ):
        """
        Initialize OrganizationService.

        Args:
            repository: Organization persistence
            creator: Organization creation sequence
            bootstrap: Default-organization decisions per deployment mode
            logo_manager: Logo upload/delete
            settings_store: Common-settings writes
            event_bus: Receives OrgDeletedEvent notifications
        """
        self._repository = repository
        self._creator = creator
        self._bootstrap = bootstrap
        self._logo_manager = logo_manager
        self._settings_store = settings_store
        self._event_bus = event_bus

    # ─────────────────────────────────────────────────────────────────
    # Creation
    # ─────────────────────────────────────────────────────────────────

    async def create_default(
        self,
        user: WorkspaceUser,
        language: Optional[str] = None,
    ) -> Optional[Organization]:
        """
        Create (SAAS) or join (ENTERPRISE) the default organization of a new user.

        Returns:
            The created organization, or None when the user joined an existing one
        """
        return await self._bootstrap.create_default(user, language)

    async def get_organization_in_enterprise_mode(self) -> Optional[Organization]:
        return await self._bootstrap.get_organization_in_enterprise_mode()

    async def create(self, organization: Organization, creator_id: str) -> Organization:
        """
        Create an organization and make the creator its admin.

        Args:
            organization: New organization without an id
            creator_id: User ID of creator

        Returns:
            Created organization with its id
        """
        return await self._creator.create(organization, creator_id)

    # ─────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────

    async def get_by_id(self, org_id: str) -> Organization:
        """
        Get an active organization by ID.

        Raises:
            NotFoundException: If missing or deleted
        """
        organization = await self._repository.find_by_id_and_state(org_id, OrganizationState.ACTIVE)
        if not organization:
            raise NotFoundException(
                message="Unable to find a valid organization",
                code="UNABLE_TO_FIND_VALID_ORG",
                details={"organizationId": org_id},
            )
        return organization

    async def get_org_common_settings(self, org_id: str) -> Dict[str, Any]:
        """Common settings of an active organization, including `_updateTime` keys."""
        organization = await self.get_by_id(org_id)
        return organization.commonSettings

    def get_by_ids(self, org_ids: Iterable[str]) -> AsyncIterator[Organization]:
        """Lazily yield the active organizations among org_ids; misses are skipped."""
        return self._repository.find_by_id_in_and_state(org_ids, OrganizationState.ACTIVE)

    async def get_by_source_and_tp_company_id(
        self, source: str, company_id: str
    ) -> Optional[Organization]:
        return await self._repository.find_by_source_and_company_and_state(
            source, company_id, OrganizationState.ACTIVE
        )

    async def get_by_domain(self, domain: str) -> Optional[Organization]:
        return await self._repository.find_by_domain_and_state(domain, OrganizationState.ACTIVE)

    # ─────────────────────────────────────────────────────────────────
    # Logo
    # ─────────────────────────────────────────────────────────────────

    async def upload_logo(self, org_id: str, file: UploadFile) -> bool:
        return await self._logo_manager.upload_logo(org_id, file)

    async def delete_logo(self, org_id: str) -> bool:
        return await self._logo_manager.delete_logo(org_id)

    # ─────────────────────────────────────────────────────────────────
    # Updates
    # ─────────────────────────────────────────────────────────────────

    async def update(self, org_id: str, update: OrganizationUpdate) -> bool:
        """
        Patch the fields explicitly set on `update`.

        Deleted organizations are left untouched.

        Returns:
            True if a non-deleted organization matched
        """
        fields = update.to_patch()
        if not fields:
            return False
        return await self._repository.update_by_id(
            fields, org_id, exclude_state=OrganizationState.DELETED
        )

    async def update_common_settings(self, org_id: str, key: str, value: Any) -> bool:
        return await self._settings_store.update_common_settings(org_id, key, value)

    # ─────────────────────────────────────────────────────────────────
    # Deletion
    # ─────────────────────────────────────────────────────────────────

    async def delete(self, org_id: str) -> bool:
        """
        Soft-delete an organization and announce it.

        The record is kept with state DELETED. An OrgDeletedEvent is published
        only when the state change was applied; delivery is not awaited.

        Returns:
            True if an active organization was marked deleted
        """
        deleted = await self._repository.update_by_id(
            {"state": OrganizationState.DELETED.value},
            org_id,
            exclude_state=OrganizationState.DELETED,
        )

        if deleted:
            self._event_bus.publish(OrgDeletedEvent(org_id=org_id))
            logger.info(f"Deleted organization {org_id}")

        return deleted
