import logging
from datetime import datetime
from typing import List

from .exceptions import DuplicateKeyError, LocationWarehouseLimitError, WarehouseNotFoundError
from .locations import LocationPolicy
from .models import Warehouse
from .repositories import WarehouseStore
from .search import SearchCriteria
from .validation import validate, validate_archive

logger = logging.getLogger(__name__)


class WarehouseService:
    """Domain service for warehouse lifecycle operations."""

    def __init__(self, warehouse_store: WarehouseStore, location_policy: LocationPolicy):
        self.warehouse_store = warehouse_store
        self.location_policy = location_policy

    def create_warehouse(self, proposed: Warehouse) -> Warehouse:
        """Create a new warehouse. Missing stock defaults to zero."""
        if proposed.stock is None:
            proposed = proposed.copy(stock=0)

        if self.warehouse_store.find_by_code(proposed.business_unit_code) is not None:
            raise DuplicateKeyError(
                f"Warehouse with business unit code '{proposed.business_unit_code}' already exists"
            )

        validate(proposed, None, self.location_policy, require_current=False).raise_for_error()

        location = self.location_policy.resolve_by_identifier(proposed.location)
        active = self.warehouse_store.count_active_at(location.identification)
        if active >= location.max_number_of_warehouses:
            raise LocationWarehouseLimitError(
                f"Location '{location.identification}' already has the maximum number of "
                f"warehouses ({location.max_number_of_warehouses})"
            )

        warehouse = proposed.copy(
            created_at=proposed.created_at or datetime.now(),
            archived_at=None,
            version=None,
        )
        created = self.warehouse_store.create(warehouse)
        logger.info(f"Created warehouse {created.business_unit_code} at {created.location}")
        return created

    def replace(self, proposed: Warehouse) -> Warehouse:
        """
        Replace location, capacity and stock of an active warehouse.

        The write is checked against ``proposed.version`` when the caller
        supplies it, otherwise against the version loaded here. A
        VersionConflictError is surfaced as is; re-reading and resubmitting
        is up to the caller.

        Returns:
            Updated warehouse
        """
        code = proposed.business_unit_code
        current = self.warehouse_store.find_by_code(code)
        validate(proposed, current, self.location_policy).raise_for_error()

        expected_version = proposed.version if proposed.version is not None else current.version

        def apply_replacement(stored: Warehouse) -> Warehouse:
            return stored.copy(
                location=proposed.location,
                capacity=proposed.capacity,
                stock=proposed.stock,
            )

        updated = self.warehouse_store.versioned_update(code, expected_version, apply_replacement)
        logger.info(f"Replaced warehouse {code}, version {expected_version} -> {updated.version}")
        return updated

    def archive(self, code: str) -> Warehouse:
        """Archive an active warehouse. Archived is terminal."""
        current = self.warehouse_store.find_by_code(code)
        validate_archive(code, current).raise_for_error()

        archived_at = datetime.now()
        archived = self.warehouse_store.versioned_update(
            code, current.version, lambda stored: stored.copy(archived_at=archived_at)
        )
        logger.info(f"Archived warehouse {code}")
        return archived

    def get_warehouse(self, code: str) -> Warehouse:
        """Get a warehouse by business unit code."""
        warehouse = self.warehouse_store.find_by_code(code)
        if warehouse is None:
            raise WarehouseNotFoundError(f"Warehouse with business unit code '{code}' does not exist")
        return warehouse

    def list_warehouses(self) -> List[Warehouse]:
        """List all active warehouses."""
        return self.warehouse_store.get_all()

    def search(self, criteria: SearchCriteria) -> List[Warehouse]:
        """Search active warehouses."""
        return self.warehouse_store.search(criteria)
