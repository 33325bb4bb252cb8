"""Domain events published by the organization lifecycle."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(frozen=True)
class OrgDeletedEvent:
    """An organization was soft-deleted."""
    org_id: str
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
