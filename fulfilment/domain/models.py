from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Optional


@dataclass
class Warehouse:
    """Warehouse entity.

    ``capacity`` and ``stock`` are optional so that an incoming proposal can
    be checked by the validator instead of failing on construction.
    """
    business_unit_code: str
    location: Optional[str] = None
    capacity: Optional[int] = None
    stock: Optional[int] = None
    created_at: Optional[datetime] = None
    archived_at: Optional[datetime] = None
    version: Optional[int] = None

    @property
    def is_archived(self) -> bool:
        """Check if warehouse is archived."""
        return self.archived_at is not None

    def copy(self, **changes) -> 'Warehouse':
        """Return a detached copy with the given fields changed."""
        return replace(self, **changes)


class MutationKind(Enum):
    CREATED = "created"
    UPDATED = "updated"


@dataclass(frozen=True)
class MutationOccurrence:
    """A successful store write waiting for post-commit delivery."""
    warehouse: Warehouse
    kind: MutationKind
