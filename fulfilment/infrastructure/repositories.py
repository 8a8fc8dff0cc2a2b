import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import asc, desc
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import flag_modified
from sqlalchemy.orm.exc import StaleDataError

from fulfilment.domain.exceptions import DuplicateKeyError, VersionConflictError, WarehouseNotFoundError
from fulfilment.domain.models import MutationKind, MutationOccurrence, Warehouse
from fulfilment.domain.repositories import Mutator, WarehouseStore
from fulfilment.domain.search import SearchCriteria
from .orm import WarehouseORM

logger = logging.getLogger(__name__)

SORT_COLUMNS = {
    "capacity": WarehouseORM.capacity,
    "createdAt": WarehouseORM.created_at,
}

# Bounds of a signed 64-bit SQL INTEGER.
INTEGER_MIN = -(2 ** 63)
INTEGER_MAX = 2 ** 63 - 1


def _to_domain(warehouse_orm: WarehouseORM) -> Warehouse:
    return Warehouse(
        business_unit_code=warehouse_orm.business_unit_code,
        location=warehouse_orm.location,
        capacity=warehouse_orm.capacity,
        stock=warehouse_orm.stock,
        created_at=warehouse_orm.created_at,
        archived_at=warehouse_orm.archived_at,
        version=warehouse_orm.version,
    )


def _is_unique_violation(error: IntegrityError) -> bool:
    # SQLite "UNIQUE constraint failed", PostgreSQL "duplicate key value violates unique
    # constraint", MySQL "Duplicate entry". NOT NULL and CHECK failures are not duplicates.
    message = str(error.orig).lower()
    return "unique" in message or "duplicate" in message


class SqlAlchemyWarehouseRepository(WarehouseStore):
    """SQLAlchemy implementation of WarehouseStore."""

    def __init__(self, session: Session):
        self.session = session
        self.occurrences: List[MutationOccurrence] = []

    def _active(self):
        return self.session.query(WarehouseORM).filter(WarehouseORM.archived_at.is_(None))

    def get_all(self) -> List[Warehouse]:
        """List active warehouses."""
        return [_to_domain(w) for w in self._active().order_by(WarehouseORM.id).all()]

    def find_by_code(self, code: str) -> Optional[Warehouse]:
        """Get a warehouse by business unit code."""
        warehouse_orm = self.session.query(WarehouseORM).filter_by(business_unit_code=code).first()
        if not warehouse_orm:
            return None
        return _to_domain(warehouse_orm)

    def create(self, warehouse: Warehouse) -> Warehouse:
        """Add a new warehouse."""
        warehouse_orm = WarehouseORM(
            business_unit_code=warehouse.business_unit_code,
            location=warehouse.location,
            capacity=warehouse.capacity,
            stock=warehouse.stock,
            created_at=warehouse.created_at or datetime.now(),
            archived_at=warehouse.archived_at,
        )
        self.session.add(warehouse_orm)
        try:
            self.session.flush()
        except IntegrityError as e:
            if _is_unique_violation(e):
                raise DuplicateKeyError(
                    f"Warehouse with business unit code '{warehouse.business_unit_code}' already exists"
                ) from e
            raise

        created = _to_domain(warehouse_orm)
        self.occurrences.append(MutationOccurrence(created.copy(), MutationKind.CREATED))
        return created

    def versioned_update(self, code: str, expected_version: int, mutator: Mutator) -> Warehouse:
        """Update a warehouse if nobody changed it since ``expected_version``."""
        warehouse_orm = (
            self.session.query(WarehouseORM)
            .filter_by(business_unit_code=code)
            .populate_existing()
            .first()
        )
        if not warehouse_orm:
            raise WarehouseNotFoundError(f"Warehouse with business unit code '{code}' not found for update")

        if warehouse_orm.version != expected_version:
            logger.warning(
                f"Version conflict on {code}: expected {expected_version}, found {warehouse_orm.version}"
            )
            raise VersionConflictError(
                f"Warehouse '{code}' was modified by another transaction "
                f"(expected version {expected_version}, found {warehouse_orm.version})"
            )

        updated = mutator(_to_domain(warehouse_orm))
        warehouse_orm.location = updated.location
        warehouse_orm.capacity = updated.capacity
        warehouse_orm.stock = updated.stock
        warehouse_orm.archived_at = updated.archived_at
        # An unchanged row still has to go through the version check and bump.
        flag_modified(warehouse_orm, "stock")

        try:
            self.session.flush()
        except StaleDataError as e:
            logger.warning(f"Version conflict on {code}: concurrent write won at version {expected_version}")
            raise VersionConflictError(
                f"Warehouse '{code}' was modified by another transaction "
                f"(expected version {expected_version})"
            ) from e

        result = _to_domain(warehouse_orm)
        self.occurrences.append(MutationOccurrence(result.copy(), MutationKind.UPDATED))
        return result

    def count_active_at(self, location: str) -> int:
        """Count active warehouses at a location."""
        return self._active().filter(WarehouseORM.location == location).count()

    def search(self, criteria: SearchCriteria) -> List[Warehouse]:
        """Filtered, sorted page of active warehouses."""
        if criteria.offset > INTEGER_MAX:
            return []

        query = self._active()
        if criteria.location is not None:
            query = query.filter(WarehouseORM.location == criteria.location)
        # Bounds outside the INTEGER range either match nothing or everything.
        if criteria.min_capacity is not None:
            if criteria.min_capacity > INTEGER_MAX:
                return []
            if criteria.min_capacity > INTEGER_MIN:
                query = query.filter(WarehouseORM.capacity >= criteria.min_capacity)
        if criteria.max_capacity is not None:
            if criteria.max_capacity < INTEGER_MIN:
                return []
            if criteria.max_capacity < INTEGER_MAX:
                query = query.filter(WarehouseORM.capacity <= criteria.max_capacity)

        direction = desc if criteria.sort_order == "desc" else asc
        query = query.order_by(
            direction(SORT_COLUMNS[criteria.sort_by]),
            asc(WarehouseORM.business_unit_code),
        )
        page_size = min(criteria.page_size, INTEGER_MAX)
        return [_to_domain(w) for w in query.offset(criteria.offset).limit(page_size).all()]
