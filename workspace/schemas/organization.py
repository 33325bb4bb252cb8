"""
Pydantic models for the organization lifecycle.

Field names mirror the MongoDB document keys (camelCase). The `id` field
maps to the document `_id`.
"""

from datetime import datetime
from enum import Enum
from typing import Optional, Dict, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OrganizationState(str, Enum):
    """Organization state. DELETED is terminal."""
    ACTIVE = "ACTIVE"
    DELETED = "DELETED"


class MemberRole(str, Enum):
    """Role of a user inside an organization."""
    ADMIN = "admin"
    MEMBER = "member"


class GroupType(str, Enum):
    """System groups every organization gets on creation."""
    ALL_USERS = "allUsers"
    DEVELOPERS = "developers"


class OrganizationDomain(BaseModel):
    """External email/SSO domain correlated with an organization."""
    domain: Optional[str] = None


class Organization(BaseModel):
    """Organization record as stored in the `organizations` collection."""

    model_config = ConfigDict(use_enum_values=True, validate_assignment=True)

    id: Optional[str] = None
    name: Optional[str] = None
    state: Optional[OrganizationState] = None
    logoAssetId: Optional[str] = None
    commonSettings: Dict[str, Any] = Field(default_factory=dict)
    isAutoGeneratedOrganization: bool = False

    # External identity correlation (lookup only, not unique)
    source: Optional[str] = None
    thirdPartyCompanyId: Optional[str] = None
    organizationDomain: Optional[OrganizationDomain] = None

    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Organization":
        """Build from a raw MongoDB document."""
        data = dict(doc)
        if "_id" in data:
            data["id"] = str(data.pop("_id"))
        return cls.model_validate(data)

    def to_document(self) -> Dict[str, Any]:
        """Serialize for insertion. The id is never written."""
        return self.model_dump(exclude={"id"})


NON_NULLABLE_FIELDS = ("commonSettings", "isAutoGeneratedOrganization")


class OrganizationUpdate(BaseModel):
    """
    Partial update for an organization.

    Only fields explicitly set on the instance are written; `id` and
    `state` are not patchable here. `commonSettings` and
    `isAutoGeneratedOrganization` can be changed but never nulled.
    """

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = None
    logoAssetId: Optional[str] = None
    commonSettings: Optional[Dict[str, Any]] = None
    isAutoGeneratedOrganization: Optional[bool] = None
    source: Optional[str] = None
    thirdPartyCompanyId: Optional[str] = None
    organizationDomain: Optional[OrganizationDomain] = None

    @field_validator(*NON_NULLABLE_FIELDS)
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return value

    def to_patch(self) -> Dict[str, Any]:
        patch = self.model_dump(exclude_unset=True)
        for key in NON_NULLABLE_FIELDS:
            if key in patch and patch[key] is None:
                patch.pop(key)
        return patch


class WorkspaceUser(BaseModel):
    """Minimal view of a newly registered user."""
    id: str
    name: str


class Asset(BaseModel):
    """Uploaded binary stored in the `assets` collection."""

    id: str
    contentType: Optional[str] = None
    fileName: Optional[str] = None
    size: int = 0
    public: bool = False
    data: bytes = Field(default=b"", repr=False)
    createdAt: Optional[datetime] = None

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Asset":
        data = dict(doc)
        data["id"] = str(data.pop("_id"))
        if "data" in data:
            data["data"] = bytes(data["data"])
        return cls.model_validate(data)
