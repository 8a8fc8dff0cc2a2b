"""Domain exceptions."""


class DomainException(Exception):
    """Base exception for domain errors."""
    http_status = 500


class WarehouseNotFoundError(DomainException):
    """Raised when a warehouse is not found."""
    http_status = 404


class DuplicateKeyError(DomainException):
    """Raised when a business unit code is already taken."""
    http_status = 409


class VersionConflictError(DomainException):
    """Raised when another writer committed a change since the version was read."""
    http_status = 409


class WarehouseValidationError(DomainException):
    """Base exception for business rule violations."""
    http_status = 400


class AlreadyArchivedError(WarehouseValidationError):
    """Raised when trying to mutate an archived warehouse."""
    pass


class InvalidCapacityError(WarehouseValidationError):
    """Raised when capacity is missing or negative."""
    pass


class InvalidStockError(WarehouseValidationError):
    """Raised when stock is missing or negative."""
    pass


class InvalidLocationError(WarehouseValidationError):
    """Raised when location is unknown."""
    pass


class CapacityExceedsLocationMaxError(WarehouseValidationError):
    """Raised when capacity is above the location maximum."""
    pass


class StockExceedsCapacityError(WarehouseValidationError):
    """Raised when stock does not fit into capacity."""
    pass


class LocationWarehouseLimitError(WarehouseValidationError):
    """Raised when a location already holds its maximum number of warehouses."""
    pass


class InvalidSearchCriteriaError(DomainException):
    """Raised when search parameters are invalid."""
    http_status = 400


def http_status_for(error: Exception) -> int:
    """Map an exception to the HTTP status the transport layer should answer with."""
    if isinstance(error, DomainException):
        return error.http_status
    return 500
