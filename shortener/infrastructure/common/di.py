import threading
from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from shortener.core import container
from shortener.database import DatabaseSession

T = TypeVar("T")

# container.db is process-wide; sync endpoints build use cases from worker threads
_override_lock = threading.Lock()


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Create a FastAPI dependency for a container provider.

    Automatically handles container.db override with request-scoped database session.
    """

    def dependency(db: DatabaseSession) -> T:
        with _override_lock:
            try:
                container.db.override(db)
                return provider()
            finally:
                # Reset override once the use case is built
                container.db.reset_override()

    return dependency
