"""Main application entry point."""

import logging

from fulfilment import config
from fulfilment.domain.exceptions import DomainException, http_status_for
from fulfilment.domain.models import Warehouse
from fulfilment.domain.search import SearchCriteria
from fulfilment.domain.services import WarehouseService
from fulfilment.infrastructure.database import init_db, get_session_factory
from fulfilment.infrastructure.legacy import FileLegacyGateway
from fulfilment.infrastructure.locations import StaticLocationPolicy
from fulfilment.infrastructure.notifier import LegacySyncNotifier
from fulfilment.infrastructure.unit_of_work import SqlAlchemyUnitOfWork

logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s [%(levelname)s] %(name)s - %(message)s")
logger = logging.getLogger(__name__)


def main():
    """Main function demonstrating warehouse operations."""
    engine = init_db()
    session_factory = get_session_factory(engine)
    location_policy = StaticLocationPolicy()
    notifier = LegacySyncNotifier(FileLegacyGateway())

    def unit_of_work():
        return SqlAlchemyUnitOfWork(session_factory, post_commit_hooks=[notifier])

    print("Creating warehouses...")
    with unit_of_work() as uow:
        service = WarehouseService(uow.warehouses, location_policy)
        for code, location, capacity, stock in [
            ("MWH.001", "AMSTERDAM-001", 80, 20),
            ("MWH.012", "AMSTERDAM-001", 50, 5),
            ("MWH.023", "TILBURG-001", 30, 27),
        ]:
            if uow.warehouses.find_by_code(code) is None:
                created = service.create_warehouse(
                    Warehouse(business_unit_code=code, location=location, capacity=capacity, stock=stock)
                )
                print(f"Created warehouse: {created}")

    print("\nReplacing MWH.001...")
    try:
        with unit_of_work() as uow:
            service = WarehouseService(uow.warehouses, location_policy)
            updated = service.replace(
                Warehouse(business_unit_code="MWH.001", location="AMSTERDAM-002", capacity=60, stock=20)
            )
            print(f"Replaced: {updated}")
    except DomainException as e:
        print(f"Replace rejected ({http_status_for(e)}): {e}")

    print("\nArchiving MWH.012...")
    try:
        with unit_of_work() as uow:
            service = WarehouseService(uow.warehouses, location_policy)
            archived = service.archive("MWH.012")
            print(f"Archived: {archived}")
    except DomainException as e:
        print(f"Archive rejected ({http_status_for(e)}): {e}")

    print("\nActive warehouses by capacity:")
    with unit_of_work() as uow:
        service = WarehouseService(uow.warehouses, location_policy)
        for w in service.search(SearchCriteria(sort_by="capacity", sort_order="desc")):
            print(f"  - {w.business_unit_code} @ {w.location}: {w.stock}/{w.capacity} (v{w.version})")


if __name__ == "__main__":
    main()
