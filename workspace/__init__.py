"""
Organization lifecycle.

Creates, bootstraps, updates and soft-deletes multi-tenant organizations
on MongoDB, coordinating group, membership and logo-asset writes.
"""

from workspace.config import Settings, WorkspaceMode, get_settings, reload_settings
from workspace.dependencies import init_workspace_services, get_organization_service
from workspace.runtime import workspace_runtime

__all__ = [
    "Settings",
    "WorkspaceMode",
    "get_settings",
    "reload_settings",
    "init_workspace_services",
    "get_organization_service",
    "workspace_runtime",
]
