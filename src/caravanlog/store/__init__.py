"""Entry store layer for caravanlog."""

from caravanlog.store.base import EntryStore
from caravanlog.store.factories import STORE_BACKENDS, create_entry_store
from caravanlog.store.memory import InMemoryEntryStore
from caravanlog.store.sqlalchemy_store import SQLAlchemyEntryStore

__all__ = [
    "EntryStore",
    "InMemoryEntryStore",
    "SQLAlchemyEntryStore",
    "STORE_BACKENDS",
    "create_entry_store",
]
