"""Group services."""

from workspace.services.group.group_service import GroupService

__all__ = ["GroupService"]
