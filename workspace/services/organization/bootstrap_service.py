"""
Default organization for newly registered users.

SAAS mode gives every new user a personal, auto-generated organization.
ENTERPRISE mode joins every user to the single enterprise organization and
only creates one when none exists yet.
"""

import logging
from typing import Optional

from common.i18n import I18nService
from common.utils.exceptions import ConfigurationException
from workspace.config import Settings, SettingsProvider, get_settings
from workspace.schemas import MemberRole, Organization, OrganizationState, WorkspaceUser
from workspace.services.base import MemberDirectory, OrganizationStore
from workspace.services.organization.organization_creator import OrganizationCreator

logger = logging.getLogger(__name__)

USER_ORG_SUFFIX_KEY = "organization.userOrgSuffix"


class BootstrapService:
    """
    Decides, per deployment mode, where a new user lands.
    """

    def __init__(
        self,
        repository: OrganizationStore,
        creator: OrganizationCreator,
        member_service: MemberDirectory,
        i18n_service: I18nService,
        settings_provider: SettingsProvider = get_settings,
    ):
        """
        Initialize BootstrapService.

        Args:
            repository: Organization persistence
            creator: Runs the organization creation sequence
            member_service: Membership writes
            i18n_service: Resolves the localized organization-name suffix
            settings_provider: Returns the current settings snapshot
        """
        self._repository = repository
        self._creator = creator
        self._member_service = member_service
        self._i18n_service = i18n_service
        self._settings_provider = settings_provider

    async def create_default(
        self,
        user: WorkspaceUser,
        language: Optional[str] = None,
    ) -> Optional[Organization]:
        """
        Create or join the default organization for a new user.

        Args:
            user: The newly registered user
            language: Language for the organization-name suffix

        Returns:
            The created organization, or None when the user was joined to the
            existing enterprise organization (None is a success)

        Raises:
            ConfigurationException: If the pinned enterprise organization is deleted
        """
        settings = self._settings_provider()

        if settings.is_enterprise_mode():
            enterprise_org = await self._resolve_enterprise_organization(settings)
            if enterprise_org:
                await self._member_service.add_member(enterprise_org.id, user.id, MemberRole.MEMBER)
                logger.info(f"Joined user {user.id} to enterprise org {enterprise_org.id}")
                return None
            logger.info("No enterprise organization yet, creating one")

        suffix = self._i18n_service.t(USER_ORG_SUFFIX_KEY, language)
        organization = Organization(
            name=f"{user.name}{suffix}",
            isAutoGeneratedOrganization=True,
        )
        return await self._creator.create(organization, user.id)

    async def get_organization_in_enterprise_mode(self) -> Optional[Organization]:
        """
        Resolve the single enterprise organization.

        Returns:
            The enterprise organization, or None in SAAS mode or when no
            active organization exists

        Raises:
            ConfigurationException: If the pinned enterprise organization is deleted
        """
        return await self._resolve_enterprise_organization(self._settings_provider())

    async def _resolve_enterprise_organization(self, settings: Settings) -> Optional[Organization]:
        if not settings.is_enterprise_mode():
            return None

        enterprise_org_id = settings.get_enterprise_org_id()
        if enterprise_org_id:
            organization = await self._repository.find_by_id(enterprise_org_id)
            if organization:
                if organization.state == OrganizationState.DELETED:
                    logger.error(f"Configured enterprise org {enterprise_org_id} is deleted")
                    raise ConfigurationException(
                        message="The enterprise organization has been deleted",
                        code="ORG_DELETED_FOR_ENTERPRISE_MODE",
                        details={"organizationId": enterprise_org_id},
                    )
                return organization
            logger.warning(f"Configured enterprise org {enterprise_org_id} not found, using first active org")

        return await self._repository.find_first_by_state(OrganizationState.ACTIVE)
