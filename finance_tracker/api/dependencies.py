"""FastAPI dependencies for DI (settings, store).

Each request gets its own SQLAlchemy session wrapped in a store; services are
built from that store inside the route handlers.
"""

from collections.abc import Iterator

from finance_tracker.core.db import SessionLocal
from finance_tracker.core.settings import get_settings
from finance_tracker.core.store import SQLAlchemyStore

__all__ = ["get_settings", "get_store"]


def get_store() -> Iterator[SQLAlchemyStore]:
    """Provide a store bound to a fresh session, closed after the request."""
    store = SQLAlchemyStore(SessionLocal())
    try:
        yield store
    finally:
        store.close()
