"""Business rules for proposed warehouse states.

Rules are checked in a fixed order and the first violation wins, so the
reported error for a given input never changes:

1. current record required but missing
2. current record archived
3. capacity missing or negative
4. stock missing or negative
5. unknown location
6. capacity above the location maximum
7. stock above capacity
"""

from dataclasses import dataclass
from typing import Optional

from .exceptions import (
    AlreadyArchivedError,
    CapacityExceedsLocationMaxError,
    DomainException,
    InvalidCapacityError,
    InvalidLocationError,
    InvalidStockError,
    StockExceedsCapacityError,
    WarehouseNotFoundError,
)
from .locations import LocationPolicy
from .models import Warehouse


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation call."""
    error: Optional[DomainException] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        """Raise the first violated rule, if any."""
        if self.error is not None:
            raise self.error


VALID = ValidationResult()


def _check_current(code: str, current: Optional[Warehouse]) -> Optional[DomainException]:
    if current is None:
        return WarehouseNotFoundError(f"Warehouse with business unit code '{code}' does not exist")
    if current.is_archived:
        return AlreadyArchivedError(f"Cannot mutate an archived warehouse '{code}'")
    return None


def validate(
    proposed: Warehouse,
    current: Optional[Warehouse],
    location_policy: LocationPolicy,
    require_current: bool = True,
) -> ValidationResult:
    """Validate a proposed warehouse state against the current one."""
    if require_current:
        error = _check_current(proposed.business_unit_code, current)
        if error:
            return ValidationResult(error)

    if proposed.capacity is None or proposed.capacity < 0:
        return ValidationResult(InvalidCapacityError("Warehouse capacity must be a non-negative value"))

    if proposed.stock is None or proposed.stock < 0:
        return ValidationResult(InvalidStockError("Warehouse stock must be a non-negative value"))

    location = location_policy.resolve_by_identifier(proposed.location)
    if location is None:
        return ValidationResult(InvalidLocationError(f"Location '{proposed.location}' is not valid"))

    if proposed.capacity > location.max_capacity:
        return ValidationResult(CapacityExceedsLocationMaxError(
            f"Warehouse capacity {proposed.capacity} exceeds location max capacity "
            f"{location.max_capacity} for '{location.identification}'"
        ))

    if proposed.stock > proposed.capacity:
        return ValidationResult(StockExceedsCapacityError(
            f"Warehouse stock {proposed.stock} exceeds warehouse capacity {proposed.capacity}"
        ))

    return VALID


def validate_archive(code: str, current: Optional[Warehouse]) -> ValidationResult:
    """Archiving carries no new values, so only the current-record rules apply."""
    error = _check_current(code, current)
    return ValidationResult(error) if error else VALID
