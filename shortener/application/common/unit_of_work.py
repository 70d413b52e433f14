"""
Unit of Work interface.

The Unit of Work pattern groups the writes of one business operation into a
single transaction.

Example:
    class ShortenUrlUseCase:
        def shorten(self, raw_url: str) -> Result[ShortUrl, AppError]:
            return self.uow.run(lambda: self._save_with_retry(url))

    # or, with explicit control
    with uow:
        repo.save(short_url)
        uow.commit()
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from types import TracebackType
from typing import Self, TypeVar

T = TypeVar("T")


class UnitOfWork(ABC):
    """
    Unit of Work interface (Port).

    The Unit of Work:
    - Manages database transactions
    - Ensures atomicity of operations
    - Can be used as a context manager

    Infrastructure layer provides concrete implementations
    (e.g., SQLAlchemyUnitOfWork).
    """

    @abstractmethod
    def commit(self) -> None:
        """
        Commit the current transaction.

        This persists all changes made within the unit of work.
        """
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """
        Rollback the current transaction.

        This discards all changes made within the unit of work.
        """
        raise NotImplementedError

    def run(self, fn: Callable[[], T]) -> T:
        """
        Execute ``fn`` inside one transaction.

        Commits when ``fn`` returns, whatever it returns: a use case that
        hands back a Failure may still have state it needs kept (a revoked
        session, for instance). Rolls back and re-raises the original
        exception when ``fn`` raises.
        """
        with self:
            result = fn()
            self.commit()
            return result

    def __enter__(self) -> Self:
        """Enter the unit of work context."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """
        Exit the unit of work context.

        If an exception occurred, rollback. Otherwise, do nothing
        (commit must be called explicitly).
        """
        if exc_type is not None:
            self.rollback()
