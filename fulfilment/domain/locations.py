from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Location:
    """Physical location where warehouses can be opened."""
    identification: str
    max_number_of_warehouses: int
    max_capacity: int


class LocationPolicy(ABC):
    """Read-only lookup of allowed locations."""

    @abstractmethod
    def resolve_by_identifier(self, identifier: str) -> Optional[Location]:
        """Get a location by its identifier, None if it is not allowed."""
        pass
