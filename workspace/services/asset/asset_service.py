"""
Asset storage service.

Stores uploaded binaries (organization logos) in the `assets` collection.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from bson.binary import Binary
from fastapi import UploadFile
from motor.motor_asyncio import AsyncIOMotorDatabase

from common.utils.exceptions import ValidationException
from workspace.repositories import to_object_id
from workspace.schemas import Asset
from workspace.services.base import AssetStore

logger = logging.getLogger(__name__)


class AssetService(AssetStore):
    """
    Uploads and deletes binary assets.
    Size limits are passed per call so they can be reconfigured live.
    """

    def __init__(self, db: AsyncIOMotorDatabase):
        """
        Initialize AssetService.

        Args:
            db: MongoDB database connection
        """
        self._assets_collection = db["assets"]

    async def upload(self, file: UploadFile, max_size_kb: int, public: bool) -> Asset:
        """
        Store an uploaded file.

        Args:
            file: Uploaded file
            max_size_kb: Maximum accepted size in kilobytes
            public: Whether the asset may be listed publicly

        Returns:
            The stored asset

        Raises:
            ValidationException: If the file is empty or too large
        """
        data = await file.read()

        if not data:
            raise ValidationException(message="Uploaded file is empty", code="EMPTY_FILE")

        if len(data) > max_size_kb * 1024:
            raise ValidationException(
                message=f"File exceeds the {max_size_kb}KB limit",
                code="FILE_TOO_LARGE",
                details={"maxSizeKb": max_size_kb, "size": len(data)},
            )

        asset_doc = {
            "contentType": file.content_type,
            "fileName": file.filename,
            "size": len(data),
            "public": public,
            "data": Binary(data),
            "createdAt": datetime.now(timezone.utc),
        }

        result = await self._assets_collection.insert_one(asset_doc)
        asset_doc["_id"] = result.inserted_id

        logger.info(f"Stored asset {result.inserted_id} ({len(data)} bytes)")
        return Asset.from_document(asset_doc)

    async def find_by_id(self, asset_id: str) -> Optional[Asset]:
        oid = to_object_id(asset_id)
        if oid is None:
            return None
        doc = await self._assets_collection.find_one({"_id": oid})
        return Asset.from_document(doc) if doc else None

    async def delete(self, asset: Asset) -> None:
        await self._assets_collection.delete_one({"_id": to_object_id(asset.id)})
        logger.info(f"Deleted asset {asset.id}")

    async def remove(self, asset_id: str) -> bool:
        oid = to_object_id(asset_id)
        if oid is None:
            return False
        result = await self._assets_collection.delete_one({"_id": oid})
        if result.deleted_count:
            logger.info(f"Removed asset {asset_id}")
        return result.deleted_count > 0
