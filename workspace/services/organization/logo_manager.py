"""
Organization logo lifecycle.

Upload swaps the reference first and deletes the superseded asset second,
so an organization never points at a missing asset. If the swap matches no
organization the freshly uploaded asset is removed again. Delete removes the
asset first and clears the reference second; if the second write fails
the organization keeps a stale reference that a retry of delete_logo
reports as a dangling asset.
"""

import logging

from fastapi import UploadFile

from common.utils.exceptions import NotFoundException
from workspace.config import SettingsProvider, get_settings
from workspace.schemas import OrganizationState
from workspace.services.base import AssetStore, OrganizationStore

logger = logging.getLogger(__name__)


class LogoManager:
    """Uploads, replaces and clears organization logos."""

    def __init__(
        self,
        repository: OrganizationStore,
        asset_store: AssetStore,
        settings_provider: SettingsProvider = get_settings,
    ):
        """
        Initialize LogoManager.

        Args:
            repository: Organization persistence
            asset_store: Binary asset storage
            settings_provider: Returns the current settings snapshot
        """
        self._repository = repository
        self._asset_store = asset_store
        self._settings_provider = settings_provider

    async def upload_logo(self, org_id: str, file: UploadFile) -> bool:
        """
        Upload a new logo and point the organization at it.

        Args:
            org_id: Organization ID
            file: Uploaded image

        Returns:
            True if the organization record now references the new asset

        Raises:
            NotFoundException: If the organization is missing or deleted
            ValidationException: If the asset store rejects the file
        """
        settings = self._settings_provider()

        organization = await self._repository.find_by_id_and_state(org_id, OrganizationState.ACTIVE)
        if not organization:
            raise NotFoundException(
                message="Unable to find a valid organization",
                code="UNABLE_TO_FIND_VALID_ORG",
                details={"organizationId": org_id},
            )
        previous_asset_id = organization.logoAssetId

        asset = await self._asset_store.upload(file, settings.LOGO_MAX_SIZE_KB, False)

        updated = await self._repository.update_by_id(
            {"logoAssetId": asset.id}, org_id, exclude_state=OrganizationState.DELETED
        )
        if not updated:
            logger.warning(f"Org {org_id} vanished during logo upload; removing asset {asset.id}")
            await self._asset_store.remove(asset.id)
            return False

        logger.info(f"Org {org_id} logo set to asset {asset.id}")

        if previous_asset_id and previous_asset_id != asset.id:
            await self._asset_store.remove(previous_asset_id)
            logger.info(f"Removed superseded logo asset {previous_asset_id} of org {org_id}")

        return True

    async def delete_logo(self, org_id: str) -> bool:
        """
        Delete the organization's logo asset and clear the reference.

        Args:
            org_id: Organization ID

        Returns:
            True if the reference was cleared

        Raises:
            NotFoundException: If the organization is not active, has no logo,
                or references an asset that no longer exists
        """
        organization = await self._repository.find_by_id_and_state(org_id, OrganizationState.ACTIVE)
        asset_id = organization.logoAssetId if organization else None

        if not asset_id or not asset_id.strip():
            raise NotFoundException(message="Asset not found", code="ASSET_NOT_FOUND")

        asset = await self._asset_store.find_by_id(asset_id)
        if not asset:
            raise NotFoundException(
                message=f"Asset not found: {asset_id}",
                code="ASSET_NOT_FOUND",
                details={"assetId": asset_id},
            )

        await self._asset_store.delete(asset)

        cleared = await self._repository.update_by_id({"logoAssetId": None}, org_id)
        logger.info(f"Deleted logo asset {asset_id} of org {org_id}")
        return cleared
