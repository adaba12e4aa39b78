"""Entry store factory functions."""

from caravanlog.domain.errors import ValidationError
from caravanlog.store.base import EntryStore
from caravanlog.store.memory import InMemoryEntryStore
from caravanlog.store.sqlalchemy_store import SQLAlchemyEntryStore

STORE_BACKENDS = ("memory", "sqlite")


def create_entry_store(backend: str = "memory") -> EntryStore:
    """Create an entry store.

    Args:
        backend: "memory" for a plain list, "sqlite" for an in-memory SQLite
            database through SQLAlchemy

    Returns:
        Empty EntryStore instance

    Raises:
        ValidationError: If the backend name is unknown
    """
    if backend == "memory":
        return InMemoryEntryStore()
    if backend == "sqlite":
        return SQLAlchemyEntryStore()
    raise ValidationError(
        f"Unknown store backend '{backend}'. Supported backends: {', '.join(STORE_BACKENDS)}"
    )
