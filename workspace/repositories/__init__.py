"""Workspace repositories."""

from workspace.repositories.organization_repository import OrganizationRepository, to_object_id

__all__ = ["OrganizationRepository", "to_object_id"]
