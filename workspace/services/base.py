"""
Collaborator interfaces used by the organization lifecycle.

The lifecycle only issues individual reads, writes and deletes against
these; it never holds locks across them. MongoDB-backed implementations
ship alongside, but any implementation honoring the contracts works.
"""

from abc import ABC, abstractmethod
from typing import Any, AsyncIterator, Dict, Iterable, Optional

from fastapi import UploadFile

from workspace.schemas import Asset, MemberRole, Organization, OrganizationState


class OrganizationStore(ABC):
    """Persistence for organization records."""

    @abstractmethod
    async def save(self, organization: Organization) -> Organization:
        """Insert a new organization and return it with its assigned id."""
        pass

    @abstractmethod
    async def find_by_id(self, org_id: str) -> Optional[Organization]:
        pass

    @abstractmethod
    async def find_by_id_and_state(
        self, org_id: str, state: OrganizationState
    ) -> Optional[Organization]:
        pass

    @abstractmethod
    def find_by_id_in_and_state(
        self, org_ids: Iterable[str], state: OrganizationState
    ) -> AsyncIterator[Organization]:
        pass

    @abstractmethod
    async def find_first_by_state(self, state: OrganizationState) -> Optional[Organization]:
        pass

    @abstractmethod
    async def find_by_source_and_company_and_state(
        self, source: str, company_id: str, state: OrganizationState
    ) -> Optional[Organization]:
        pass

    @abstractmethod
    async def find_by_domain_and_state(
        self, domain: str, state: OrganizationState
    ) -> Optional[Organization]:
        pass

    @abstractmethod
    async def update_by_id(
        self,
        fields: Dict[str, Any],
        org_id: str,
        exclude_state: Optional[OrganizationState] = None,
    ) -> bool:
        """
        Patch only the given fields (dotted paths allowed).

        Returns:
            True if an existing record matched
        """
        pass


class GroupProvisioner(ABC):
    """Creates the system groups of a new organization."""

    @abstractmethod
    async def create_all_users_group(self, organization_id: str) -> str:
        pass

    @abstractmethod
    async def create_dev_group(self, organization_id: str) -> str:
        pass


class MemberDirectory(ABC):
    """Organization membership writes."""

    @abstractmethod
    async def add_member(self, organization_id: str, user_id: str, role: MemberRole) -> bool:
        """
        Returns:
            True if a membership was created, False if one already existed
        """
        pass


class AssetStore(ABC):
    """Binary asset storage."""

    @abstractmethod
    async def upload(self, file: UploadFile, max_size_kb: int, public: bool) -> Asset:
        pass

    @abstractmethod
    async def find_by_id(self, asset_id: str) -> Optional[Asset]:
        pass

    @abstractmethod
    async def delete(self, asset: Asset) -> None:
        pass

    @abstractmethod
    async def remove(self, asset_id: str) -> bool:
        """Delete by id. Returns False when nothing was stored under it."""
        pass
