"""
Per-key versioned writes to an organization's common settings.

Each write sets `commonSettings.<key>` and `commonSettings.<key>_updateTime`
in one `$set`. There is no read-modify-write: writes to different keys
never interfere, and concurrent writes to the same key are last-write-wins.
"""

import logging
import time
from typing import Any, Callable

from common.utils.exceptions import InvalidParameterException
from workspace.schemas import OrganizationState
from workspace.services.base import OrganizationStore

logger = logging.getLogger(__name__)

COMMON_SETTINGS_FIELD = "commonSettings"
UPDATE_TIME_SUFFIX = "_updateTime"


def build_update_time_key(key: str) -> str:
    return key + UPDATE_TIME_SUFFIX


def current_millis() -> int:
    return int(time.time() * 1000)


class SettingsStore:
    """Writes single common-settings keys with their update timestamps."""

    def __init__(
        self,
        repository: OrganizationStore,
        clock: Callable[[], int] = current_millis,
    ):
        """
        Initialize SettingsStore.

        Args:
            repository: Organization persistence
            clock: Returns the current time in epoch milliseconds
        """
        self._repository = repository
        self._clock = clock

    async def update_common_settings(self, org_id: str, key: str, value: Any) -> bool:
        """
        Set one common-settings key.

        Deleted organizations are not written to.

        Args:
            org_id: Organization ID
            key: Setting key (no dots, no leading '$')
            value: New value

        Returns:
            True if a non-deleted organization was updated

        Raises:
            InvalidParameterException: If the key cannot be used as a field name
        """
        if not key or not key.strip() or "." in key or key.startswith("$"):
            raise InvalidParameterException("key", message=f"Invalid common settings key: {key!r}")

        fields = {
            f"{COMMON_SETTINGS_FIELD}.{key}": value,
            f"{COMMON_SETTINGS_FIELD}.{build_update_time_key(key)}": self._clock(),
        }

        updated = await self._repository.update_by_id(
            fields, org_id, exclude_state=OrganizationState.DELETED
        )
        if not updated:
            logger.warning(f"Common setting '{key}' not applied: org {org_id} missing or deleted")
        return updated
