"""
System group provisioning.

Every organization owns one "all users" group and one "developers" group.
This service only creates them; group membership logic lives elsewhere.
"""

import logging
from datetime import datetime, timezone

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from workspace.schemas import GroupType
from workspace.services.base import GroupProvisioner

logger = logging.getLogger(__name__)


class GroupService(GroupProvisioner):
    """
    Creates the system groups of an organization.
    """

    GROUP_NAMES = {
        GroupType.ALL_USERS: "All Users",
        GroupType.DEVELOPERS: "Developers",
    }

    def __init__(self, db: AsyncIOMotorDatabase):
        """
        Initialize GroupService.

        Args:
            db: MongoDB database connection
        """
        self._groups_collection = db["groups"]

    async def create_all_users_group(self, organization_id: str) -> str:
        return await self._create_system_group(organization_id, GroupType.ALL_USERS)

    async def create_dev_group(self, organization_id: str) -> str:
        return await self._create_system_group(organization_id, GroupType.DEVELOPERS)

    async def _create_system_group(self, organization_id: str, group_type: GroupType) -> str:
        """
        Insert a system group document.

        Args:
            organization_id: Owning organization
            group_type: Which system group

        Returns:
            The new group id
        """
        now = datetime.now(timezone.utc)
        group_doc = {
            "organizationId": ObjectId(organization_id),
            "type": group_type.value,
            "name": self.GROUP_NAMES[group_type],
            "systemGroup": True,
            "createdAt": now,
            "updatedAt": now,
        }

        result = await self._groups_collection.insert_one(group_doc)
        logger.info(f"Created {group_type.value} group {result.inserted_id} for org {organization_id}")
        return str(result.inserted_id)
