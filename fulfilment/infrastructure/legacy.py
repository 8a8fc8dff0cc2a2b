import logging
import os
import time
from abc import ABC, abstractmethod

import orjson as json

from fulfilment import config
from fulfilment.domain.models import Warehouse

logger = logging.getLogger(__name__)


class LegacyWarehouseGateway(ABC):
    """Client of the legacy warehouse manager."""

    @abstractmethod
    def create_warehouse_on_legacy_system(self, warehouse: Warehouse) -> None:
        pass

    @abstractmethod
    def update_warehouse_on_legacy_system(self, warehouse: Warehouse) -> None:
        pass


def serialize_warehouse(warehouse: Warehouse) -> bytes:
    """Serialize a warehouse snapshot for the legacy system."""
    return json.dumps({
        "businessUnitCode": warehouse.business_unit_code,
        "location": warehouse.location,
        "capacity": warehouse.capacity,
        "stock": warehouse.stock,
        "createdAt": warehouse.created_at,
        "archivedAt": warehouse.archived_at,
        "version": warehouse.version,
    })


class FileLegacyGateway(LegacyWarehouseGateway):
    """
    Drops one JSON file per warehouse change into a directory the legacy
    manager picks up from.
    """

    def __init__(self, output_dir: str = config.LEGACY_OUTPUT_DIR):
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

    def create_warehouse_on_legacy_system(self, warehouse: Warehouse) -> None:
        self._write("created", warehouse)

    def update_warehouse_on_legacy_system(self, warehouse: Warehouse) -> None:
        self._write("updated", warehouse)

    def _write(self, action: str, warehouse: Warehouse) -> str:
        filename = f"{action}_{warehouse.business_unit_code}_v{warehouse.version}_{time.time_ns()}.json"
        path = os.path.join(self.output_dir, filename)
        with open(path, "wb") as f:
            f.write(serialize_warehouse(warehouse))
        logger.info(f"Legacy system notified: {action} {warehouse.business_unit_code} -> {path}")
        return path
