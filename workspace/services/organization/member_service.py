"""
Organization membership writes.
"""

import logging
from datetime import datetime, timezone

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from workspace.schemas import MemberRole
from workspace.services.base import MemberDirectory

logger = logging.getLogger(__name__)


class OrgMemberService(MemberDirectory):
    """
    Adds users to organizations.
    """

    def __init__(self, db: AsyncIOMotorDatabase):
        """
        Initialize OrgMemberService.

        Args:
            db: MongoDB database connection
        """
        self._members_collection = db["organizationMembers"]

    async def add_member(self, organization_id: str, user_id: str, role: MemberRole) -> bool:
        """
        Add a user to an organization with a role.

        Idempotent: an existing membership is left untouched.

        Args:
            organization_id: Organization ID
            user_id: User to add
            role: Role to grant

        Returns:
            True if a new membership was created
        """
        now = datetime.now(timezone.utc)
        role_value = role.value if isinstance(role, MemberRole) else role

        result = await self._members_collection.update_one(
            {
                "organizationId": ObjectId(organization_id),
                "userId": ObjectId(user_id),
            },
            {
                "$setOnInsert": {
                    "role": role_value,
                    "status": "active",
                    "joinedAt": now,
                    "createdAt": now,
                    "updatedAt": now,
                }
            },
            upsert=True,
        )

        created = result.upserted_id is not None
        if created:
            logger.info(f"Added member {user_id} to org {organization_id} as {role_value}")
        else:
            logger.debug(f"User {user_id} already a member of org {organization_id}")
        return created
