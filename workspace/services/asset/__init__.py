"""Asset services."""

from workspace.services.asset.asset_service import AssetService

__all__ = ["AssetService"]
