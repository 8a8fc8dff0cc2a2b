from abc import ABC, abstractmethod
from typing import Any, Callable, List

from .models import MutationOccurrence
from .repositories import WarehouseStore

PostCommitHook = Callable[[MutationOccurrence], None]


class UnitOfWork(ABC):
    """Abstract Unit of Work pattern.

    Post-commit hooks receive each mutation recorded during the transaction,
    only once the transaction has been committed. Nothing is delivered for a
    rolled back transaction.
    """

    warehouses: WarehouseStore

    def __init__(self):
        self._post_commit_hooks: List[PostCommitHook] = []

    def register_post_commit(self, hook: PostCommitHook) -> None:
        """Register a callback run for every mutation after a successful commit."""
        self._post_commit_hooks.append(hook)

    @abstractmethod
    def __enter__(self) -> 'UnitOfWork':
        """Enter the context manager."""
        pass

    @abstractmethod
    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit the context manager."""
        pass

    @abstractmethod
    def commit(self) -> None:
        """Commit the current transaction."""
        pass

    @abstractmethod
    def rollback(self) -> None:
        """Rollback the current transaction."""
        pass
