"""Organization lifecycle services."""

from workspace.services.organization.bootstrap_service import BootstrapService
from workspace.services.organization.logo_manager import LogoManager
from workspace.services.organization.member_service import OrgMemberService
from workspace.services.organization.organization_creator import OrganizationCreator
from workspace.services.organization.organization_service import OrganizationService
from workspace.services.organization.settings_store import SettingsStore

__all__ = [
    "BootstrapService",
    "LogoManager",
    "OrgMemberService",
    "OrganizationCreator",
    "OrganizationService",
    "SettingsStore",
]
