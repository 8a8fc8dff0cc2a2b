"""Pytest configuration and shared fixtures."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from fulfilment.domain.models import Warehouse
from fulfilment.infrastructure.legacy import LegacyWarehouseGateway
from fulfilment.infrastructure.locations import StaticLocationPolicy
from fulfilment.infrastructure.notifier import LegacySyncNotifier
from fulfilment.infrastructure.orm import Base
from fulfilment.infrastructure.unit_of_work import SqlAlchemyUnitOfWork


class RecordingLegacyGateway(LegacyWarehouseGateway):
    """Legacy gateway that remembers every call."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls = []

    def create_warehouse_on_legacy_system(self, warehouse):
        self._record("create", warehouse)

    def update_warehouse_on_legacy_system(self, warehouse):
        self._record("update", warehouse)

    def _record(self, action, warehouse):
        self.calls.append((action, warehouse))
        if self.fail:
            raise ConnectionError("legacy system unavailable")


@pytest.fixture(scope="function")
def in_memory_db():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(in_memory_db):
    """Create a session factory for testing."""
    return sessionmaker(bind=in_memory_db)


@pytest.fixture(scope="function")
def session(session_factory):
    """Create a database session for testing."""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def location_policy():
    return StaticLocationPolicy()


@pytest.fixture
def legacy_gateway():
    return RecordingLegacyGateway()


@pytest.fixture
def uow(session_factory, legacy_gateway):
    """Unit of work wired to the recording legacy gateway."""
    return SqlAlchemyUnitOfWork(session_factory, post_commit_hooks=[LegacySyncNotifier(legacy_gateway)])


@pytest.fixture
def make_warehouse():
    """Factory for warehouses with sensible defaults."""
    def _make(code, location="AMSTERDAM-001", capacity=80, stock=20, **kwargs):
        return Warehouse(business_unit_code=code, location=location, capacity=capacity, stock=stock, **kwargs)
    return _make


@pytest.fixture
def failing_gateway():
    """Legacy gateway whose every call raises."""
    return RecordingLegacyGateway(fail=True)
