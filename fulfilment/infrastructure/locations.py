from typing import Dict, Iterable, Optional

from fulfilment.domain.locations import Location, LocationPolicy

DEFAULT_LOCATIONS = (
    Location("ZWOLLE-001", 1, 40),
    Location("ZWOLLE-002", 2, 50),
    Location("AMSTERDAM-001", 5, 100),
    Location("AMSTERDAM-002", 3, 75),
    Location("TILBURG-001", 1, 40),
    Location("HELMOND-001", 1, 45),
    Location("EINDHOVEN-001", 2, 70),
    Location("VETSBY-001", 1, 90),
)


class StaticLocationPolicy(LocationPolicy):
    """In-memory location catalogue."""

    def __init__(self, locations: Iterable[Location] = DEFAULT_LOCATIONS):
        self._locations: Dict[str, Location] = {
            location.identification: location for location in locations
        }

    def resolve_by_identifier(self, identifier: str) -> Optional[Location]:
        """Get a location by its identifier."""
        if identifier is None:
            return None
        return self._locations.get(identifier)
