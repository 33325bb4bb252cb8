"""Workspace schemas."""

from workspace.schemas.organization import (
    Asset,
    GroupType,
    MemberRole,
    Organization,
    OrganizationDomain,
    OrganizationState,
    OrganizationUpdate,
    WorkspaceUser,
)
from workspace.schemas.events import OrgDeletedEvent

__all__ = [
    "Asset",
    "GroupType",
    "MemberRole",
    "Organization",
    "OrganizationDomain",
    "OrganizationState",
    "OrganizationUpdate",
    "WorkspaceUser",
    "OrgDeletedEvent",
]
