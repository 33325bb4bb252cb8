"""
Workspace application settings.

Extends the base settings with deployment-mode and logo configuration.
Services never hold on to a Settings instance: they call a settings
provider at the start of each operation, so a reload takes effect on the
next call without touching calls already in flight.
"""

from enum import Enum
from typing import Callable, Optional

from pydantic import Field

from common.config import BaseAppSettings


class WorkspaceMode(str, Enum):
    """Deployment mode."""
    SAAS = "SAAS"  # one organization per user by default
    ENTERPRISE = "ENTERPRISE"  # a single organization shared by all users


class Settings(BaseAppSettings):
    """Organization lifecycle settings."""

    # ==========================================================================
    # Workspace
    # ==========================================================================
    WORKSPACE_MODE: WorkspaceMode = WorkspaceMode.SAAS

    # Pins the enterprise organization; blank means "first active organization"
    ENTERPRISE_ORG_ID: Optional[str] = None

    # ==========================================================================
    # Assets
    # ==========================================================================
    LOGO_MAX_SIZE_KB: int = Field(default=300, gt=0)

    # ==========================================================================
    # Events
    # ==========================================================================
    EVENT_QUEUE_SIZE: int = Field(default=0, ge=0)  # 0 = unbounded
    EVENT_STOP_TIMEOUT: float = Field(default=10.0, gt=0)  # seconds to drain on shutdown

    def is_enterprise_mode(self) -> bool:
        return self.WORKSPACE_MODE == WorkspaceMode.ENTERPRISE

    def get_enterprise_org_id(self) -> Optional[str]:
        """Configured enterprise organization id, None when blank."""
        if self.ENTERPRISE_ORG_ID and self.ENTERPRISE_ORG_ID.strip():
            return self.ENTERPRISE_ORG_ID.strip()
        return None


SettingsProvider = Callable[[], Settings]

_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Current settings snapshot, loaded from the environment on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Re-read the environment; subsequent operations see the new values."""
    global _settings
    _settings = Settings()
    return _settings
