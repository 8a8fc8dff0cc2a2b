"""Domain layer package."""

from .models import Warehouse, MutationKind, MutationOccurrence
from .locations import Location, LocationPolicy
from .search import SearchCriteria
from .services import WarehouseService
from .validation import ValidationResult, validate, validate_archive
from .exceptions import (
    DomainException,
    WarehouseNotFoundError,
    DuplicateKeyError,
    VersionConflictError,
    WarehouseValidationError,
    AlreadyArchivedError,
    InvalidCapacityError,
    InvalidStockError,
    InvalidLocationError,
    CapacityExceedsLocationMaxError,
    StockExceedsCapacityError,
    LocationWarehouseLimitError,
    InvalidSearchCriteriaError,
    http_status_for,
)

__all__ = [
    'Warehouse',
    'MutationKind',
    'MutationOccurrence',
    'Location',
    'LocationPolicy',
    'SearchCriteria',
    'WarehouseService',
    'ValidationResult',
    'validate',
    'validate_archive',
    'DomainException',
    'WarehouseNotFoundError',
    'DuplicateKeyError',
    'VersionConflictError',
    'WarehouseValidationError',
    'AlreadyArchivedError',
    'InvalidCapacityError',
    'InvalidStockError',
    'InvalidLocationError',
    'CapacityExceedsLocationMaxError',
    'StockExceedsCapacityError',
    'LocationWarehouseLimitError',
    'InvalidSearchCriteriaError',
    'http_status_for',
]
