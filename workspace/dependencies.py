"""
Dependency wiring for the organization lifecycle.

Services are built once at startup by init_workspace_services() and
fetched through the getters (usable as FastAPI dependencies).
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from common.events import EventBus
from common.i18n import I18nService
from workspace.config import SettingsProvider, get_settings
from workspace.repositories import OrganizationRepository
from workspace.services.asset import AssetService
from workspace.services.group import GroupService
from workspace.services.organization import (
    BootstrapService,
    LogoManager,
    OrgMemberService,
    OrganizationCreator,
    OrganizationService,
    SettingsStore,
)


# ─────────────────────────────────────────────────────────────────
# Global service instances
# ─────────────────────────────────────────────────────────────────

_event_bus: Optional[EventBus] = None
_organization_service: Optional[OrganizationService] = None


def init_workspace_services(
    db: AsyncIOMotorDatabase,
    i18n_service: I18nService,
    event_bus: EventBus,
    settings_provider: SettingsProvider = get_settings,
) -> OrganizationService:
    """
    Build all organization lifecycle services.

    Called once at application startup.

    Args:
        db: MongoDB database connection
        i18n_service: Localized message lookup
        event_bus: Receives lifecycle events
        settings_provider: Returns the current settings snapshot

    Returns:
        The organization service facade
    """
    global _event_bus, _organization_service

    repository = OrganizationRepository(db)
    member_service = OrgMemberService(db)
    creator = OrganizationCreator(repository, GroupService(db), member_service)

    _event_bus = event_bus
    _organization_service = OrganizationService(
        repository=repository,
        creator=creator,
        bootstrap=BootstrapService(
            repository, creator, member_service, i18n_service, settings_provider
        ),
        logo_manager=LogoManager(repository, AssetService(db), settings_provider),
        settings_store=SettingsStore(repository),
        event_bus=event_bus,
    )
    return _organization_service


def reset_workspace_services() -> None:
    """Drop the service instances (used on shutdown)."""
    global _event_bus, _organization_service
    _event_bus = None
    _organization_service = None


def get_organization_service() -> OrganizationService:
    """Get organization service instance."""
    if _organization_service is None:
        raise RuntimeError("Workspace services not initialized.")
    return _organization_service


def get_event_bus() -> EventBus:
    """Get event bus instance."""
    if _event_bus is None:
        raise RuntimeError("Workspace services not initialized.")
    return _event_bus
