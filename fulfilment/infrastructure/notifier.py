import logging

from fulfilment.domain.models import MutationKind, MutationOccurrence
from .legacy import LegacyWarehouseGateway

logger = logging.getLogger(__name__)


class LegacySyncNotifier:
    """
    Post-commit hook forwarding committed warehouse mutations to the legacy
    system.

    Delivery is best effort: there is no retry and no idempotency key, so a
    failed call leaves the legacy system behind until the next change of the
    same warehouse.
    """

    def __init__(self, gateway: LegacyWarehouseGateway):
        self.gateway = gateway

    def __call__(self, occurrence: MutationOccurrence) -> None:
        warehouse = occurrence.warehouse
        logger.info(
            f"Warehouse {occurrence.kind.value} event received, syncing with legacy system: "
            f"{warehouse.business_unit_code}"
        )
        if occurrence.kind is MutationKind.CREATED:
            self.gateway.create_warehouse_on_legacy_system(warehouse)
        else:
            self.gateway.update_warehouse_on_legacy_system(warehouse)
