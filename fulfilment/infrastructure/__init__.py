"""Infrastructure layer package."""

from .database import init_db, get_engine, get_session_factory
from .unit_of_work import SqlAlchemyUnitOfWork
from .repositories import SqlAlchemyWarehouseRepository
from .locations import StaticLocationPolicy
from .legacy import LegacyWarehouseGateway, FileLegacyGateway
from .notifier import LegacySyncNotifier

__all__ = [
    'init_db',
    'get_engine',
    'get_session_factory',
    'SqlAlchemyUnitOfWork',
    'SqlAlchemyWarehouseRepository',
    'StaticLocationPolicy',
    'LegacyWarehouseGateway',
    'FileLegacyGateway',
    'LegacySyncNotifier',
]
