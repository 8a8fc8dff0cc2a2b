import logging
from typing import Any, Iterable

from sqlalchemy.orm import Session

from fulfilment.domain.unit_of_work import PostCommitHook, UnitOfWork
from .repositories import SqlAlchemyWarehouseRepository

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of Unit of Work pattern."""

    def __init__(self, session_factory, post_commit_hooks: Iterable[PostCommitHook] = ()):
        super().__init__()
        self.session_factory = session_factory
        self.session: Session = None
        self.warehouses: SqlAlchemyWarehouseRepository = None
        for hook in post_commit_hooks:
            self.register_post_commit(hook)

    def __enter__(self) -> 'SqlAlchemyUnitOfWork':
        """Enter the context manager."""
        self.session = self.session_factory()
        self.warehouses = SqlAlchemyWarehouseRepository(self.session)
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit the context manager."""
        try:
            if exc_type:
                self.rollback()
            else:
                self.commit()
        finally:
            self.session.close()

    def commit(self) -> None:
        """Commit the current transaction, then deliver its mutations to post-commit hooks."""
        try:
            self.session.commit()
        except Exception:
            self.rollback()
            raise

        committed = list(self.warehouses.occurrences)
        self.warehouses.occurrences.clear()
        for occurrence in committed:
            for hook in self._post_commit_hooks:
                try:
                    hook(occurrence)
                except Exception:
                    # The local commit stands; the hook target is now out of sync.
                    logger.exception(
                        f"Post-commit hook failed for warehouse {occurrence.warehouse.business_unit_code}"
                    )

    def rollback(self) -> None:
        """Rollback the current transaction and drop its pending mutations."""
        self.session.rollback()
        if self.warehouses.occurrences:
            logger.info(f"Discarding {len(self.warehouses.occurrences)} mutation(s) after rollback")
            self.warehouses.occurrences.clear()
