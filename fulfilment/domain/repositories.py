from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from .models import MutationOccurrence, Warehouse
from .search import SearchCriteria

Mutator = Callable[[Warehouse], Warehouse]


class WarehouseStore(ABC):
    """Abstract repository for Warehouse entity.

    Every successful ``create`` or ``versioned_update`` records exactly one
    ``MutationOccurrence`` in ``occurrences``. The unit of work owning the
    store drains that list after commit or discards it on rollback.
    """

    occurrences: List[MutationOccurrence]

    @abstractmethod
    def get_all(self) -> List[Warehouse]:
        """List active (non-archived) warehouses."""
        pass

    @abstractmethod
    def find_by_code(self, code: str) -> Optional[Warehouse]:
        """Get a warehouse by business unit code, archived ones included."""
        pass

    @abstractmethod
    def create(self, warehouse: Warehouse) -> Warehouse:
        """Add a new warehouse, raise DuplicateKeyError if the code is taken."""
        pass

    @abstractmethod
    def versioned_update(self, code: str, expected_version: int, mutator: Mutator) -> Warehouse:
        """
        Apply ``mutator`` to the stored warehouse if its version still equals
        ``expected_version``.

        Raises:
            WarehouseNotFoundError: no record for ``code``
            VersionConflictError: another writer changed the record first
        """
        pass

    @abstractmethod
    def count_active_at(self, location: str) -> int:
        """Count active warehouses at a location."""
        pass

    @abstractmethod
    def search(self, criteria: SearchCriteria) -> List[Warehouse]:
        """Filtered, sorted page of active warehouses."""
        pass

    def remove(self, warehouse: Warehouse) -> None:
        raise NotImplementedError("Warehouses are archived, not removed")
