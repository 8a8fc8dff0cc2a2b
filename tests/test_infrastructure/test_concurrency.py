"""Concurrent writers against a file-backed database."""

import threading
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import Mock

import pytest

from fulfilment.domain.exceptions import VersionConflictError
from fulfilment.domain.models import Warehouse
from fulfilment.domain.services import WarehouseService
from fulfilment.infrastructure.database import get_session_factory, init_db
from fulfilment.infrastructure.unit_of_work import SqlAlchemyUnitOfWork


@pytest.fixture
def file_session_factory(tmp_path):
    """Session factory on a SQLite file so every thread gets its own connection."""
    engine = init_db(f"sqlite:///{tmp_path / 'warehouse.db'}")
    yield get_session_factory(engine)
    engine.dispose()


@pytest.fixture
def existing_code(file_session_factory):
    with SqlAlchemyUnitOfWork(file_session_factory) as uow:
        uow.warehouses.create(
            Warehouse(business_unit_code="CONCURRENT-REPLACE-001", location="AMSTERDAM-001", capacity=100, stock=50)
        )
    return "CONCURRENT-REPLACE-001"


def read(session_factory, code):
    with SqlAlchemyUnitOfWork(session_factory) as uow:
        return uow.warehouses.find_by_code(code)


class TestConcurrentWrites:
    """Test that concurrent writers never lose updates."""

    def test_write_between_read_and_flush_is_rejected(self, file_session_factory, existing_code):
        """The database itself rejects a write based on a version that changed after loading."""

        def commit_competing_change(warehouse):
            with SqlAlchemyUnitOfWork(file_session_factory) as other:
                other.warehouses.versioned_update(existing_code, 1, lambda w: w.copy(capacity=60, stock=30))
            return warehouse.copy(location="ZWOLLE-001", capacity=40, stock=25)

        with pytest.raises(VersionConflictError):
            with SqlAlchemyUnitOfWork(file_session_factory) as uow:
                uow.warehouses.versioned_update(existing_code, 1, commit_competing_change)

        final = read(file_session_factory, existing_code)
        assert (final.location, final.capacity, final.stock, final.version) == ("AMSTERDAM-001", 60, 30, 2)

    def test_concurrent_replace_exactly_one_wins(self, file_session_factory, existing_code, location_policy):
        """
        Both writers load version 1 and only then write. Exactly one replace
        succeeds; the other gets VersionConflictError and the stored state
        matches the winner completely.
        """
        barrier = threading.Barrier(2, timeout=5)
        hook = Mock()

        def replace_in_new_transaction(location, capacity, stock):
            uow = SqlAlchemyUnitOfWork(file_session_factory, post_commit_hooks=[hook])
            with uow:
                store = uow.warehouses
                versioned_update = store.versioned_update

                def synchronised(code, expected_version, mutator):
                    def wait_then_mutate(warehouse):
                        barrier.wait()
                        return mutator(warehouse)
                    return versioned_update(code, expected_version, wait_then_mutate)

                store.versioned_update = synchronised
                return WarehouseService(store, location_policy).replace(
                    Warehouse(business_unit_code=existing_code, location=location, capacity=capacity, stock=stock)
                )

        with ThreadPoolExecutor(max_workers=2) as executor:
            futures = [
                executor.submit(replace_in_new_transaction, "ZWOLLE-001", 40, 25),
                executor.submit(replace_in_new_transaction, "AMSTERDAM-001", 60, 30),
            ]
            outcomes = []
            for future in futures:
                try:
                    outcomes.append(future.result(timeout=30))
                except VersionConflictError as e:
                    outcomes.append(e)

        winners = [o for o in outcomes if isinstance(o, Warehouse)]
        losers = [o for o in outcomes if isinstance(o, VersionConflictError)]
        assert len(winners) == 1
        assert len(losers) == 1

        final = read(file_session_factory, existing_code)
        winner = winners[0]
        assert (final.location, final.capacity, final.stock) == (winner.location, winner.capacity, winner.stock)
        assert final.version == 2
        hook.assert_called_once()

    def test_stale_replace_after_other_commit(self, file_session_factory, existing_code, location_policy):
        """A caller replacing with the version it read earlier loses to a writer that committed since."""
        seen = read(file_session_factory, existing_code)

        with SqlAlchemyUnitOfWork(file_session_factory) as uow:
            WarehouseService(uow.warehouses, location_policy).replace(
                Warehouse(business_unit_code=existing_code, location="AMSTERDAM-001", capacity=60, stock=30,
                          version=seen.version)
            )

        with pytest.raises(VersionConflictError):
            with SqlAlchemyUnitOfWork(file_session_factory) as uow:
                WarehouseService(uow.warehouses, location_policy).replace(
                    Warehouse(business_unit_code=existing_code, location="ZWOLLE-001", capacity=40, stock=25,
                              version=seen.version)
                )

        final = read(file_session_factory, existing_code)
        assert (final.location, final.capacity, final.stock, final.version) == ("AMSTERDAM-001", 60, 30, 2)
