"""
MongoDB organization repository.

Reads always go through a state filter except `find_by_id`. Writes are
either a full insert (`save`) or a field-level `$set` patch
(`update_by_id`); a patch never rewrites fields it was not given.
"""

import logging
from datetime import datetime, timezone
from typing import Any, AsyncIterator, Dict, Iterable, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from workspace.schemas import Organization, OrganizationState
from workspace.services.base import OrganizationStore

logger = logging.getLogger(__name__)


def to_object_id(value: Optional[str]) -> Optional[ObjectId]:
    """Parse an id string; malformed or blank ids yield None."""
    if not value or not ObjectId.is_valid(value):
        return None
    return ObjectId(value)


def _state_value(state: OrganizationState) -> str:
    return state.value if isinstance(state, OrganizationState) else state


class OrganizationRepository(OrganizationStore):
    """Organization persistence over the `organizations` collection."""

    COLLECTION = "organizations"

    def __init__(self, db: AsyncIOMotorDatabase):
        """
        Initialize OrganizationRepository.

        Args:
            db: MongoDB database connection
        """
        self._collection = db[self.COLLECTION]

    async def save(self, organization: Organization) -> Organization:
        now = datetime.now(timezone.utc)
        doc = organization.to_document()
        doc["createdAt"] = doc.get("createdAt") or now
        doc["updatedAt"] = now

        result = await self._collection.insert_one(doc)
        logger.debug(f"Inserted organization {result.inserted_id}")

        return organization.model_copy(update={
            "id": str(result.inserted_id),
            "createdAt": doc["createdAt"],
            "updatedAt": now,
        })

    async def find_by_id(self, org_id: str) -> Optional[Organization]:
        oid = to_object_id(org_id)
        if oid is None:
            return None
        doc = await self._collection.find_one({"_id": oid})
        return Organization.from_document(doc) if doc else None

    async def find_by_id_and_state(
        self, org_id: str, state: OrganizationState
    ) -> Optional[Organization]:
        oid = to_object_id(org_id)
        if oid is None:
            return None
        doc = await self._collection.find_one({"_id": oid, "state": _state_value(state)})
        return Organization.from_document(doc) if doc else None

    async def find_by_id_in_and_state(
        self, org_ids: Iterable[str], state: OrganizationState
    ) -> AsyncIterator[Organization]:
        oids = [oid for oid in (to_object_id(org_id) for org_id in org_ids) if oid is not None]
        if not oids:
            return

        cursor = self._collection.find({"_id": {"$in": oids}, "state": _state_value(state)})
        async for doc in cursor:
            yield Organization.from_document(doc)

    async def find_first_by_state(self, state: OrganizationState) -> Optional[Organization]:
        doc = await self._collection.find_one(
            {"state": _state_value(state)},
            sort=[("_id", 1)],
        )
        return Organization.from_document(doc) if doc else None

    async def find_by_source_and_company_and_state(
        self, source: str, company_id: str, state: OrganizationState
    ) -> Optional[Organization]:
        doc = await self._collection.find_one({
            "source": source,
            "thirdPartyCompanyId": company_id,
            "state": _state_value(state),
        })
        return Organization.from_document(doc) if doc else None

    async def find_by_domain_and_state(
        self, domain: str, state: OrganizationState
    ) -> Optional[Organization]:
        doc = await self._collection.find_one({
            "organizationDomain.domain": domain,
            "state": _state_value(state),
        })
        return Organization.from_document(doc) if doc else None

    async def update_by_id(
        self,
        fields: Dict[str, Any],
        org_id: str,
        exclude_state: Optional[OrganizationState] = None,
    ) -> bool:
        oid = to_object_id(org_id)
        if oid is None or not fields:
            return False

        query: Dict[str, Any] = {"_id": oid}
        if exclude_state is not None:
            query["state"] = {"$ne": _state_value(exclude_state)}

        update = {"$set": {**fields, "updatedAt": datetime.now(timezone.utc)}}
        result = await self._collection.update_one(query, update)

        logger.debug(f"Patched organization {org_id} fields={sorted(fields)} matched={result.matched_count}")
        return result.matched_count > 0
