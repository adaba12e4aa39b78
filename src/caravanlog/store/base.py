"""Abstract entry store interface."""

from abc import ABC, abstractmethod
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from caravanlog.domain.entities import Entry


class EntryStore(ABC):
    """Ordered collection of finalized entries, keyed by id.

    New entries are listed most-recent-first; an updated entry keeps its
    position. The store knows nothing about drafts.
    """

    @abstractmethod
    def upsert(self, entry: Entry) -> None:
        """Replace the entry with the same id in place, or insert it at the front."""
        pass

    @abstractmethod
    def delete(self, entry_id: str) -> None:
        """Remove the entry with this id. Absent ids are ignored."""
        pass

    @abstractmethod
    def list(self) -> list[Entry]:
        """Return all entries in listing order.

        The result is a snapshot; it does not follow later mutations.
        """
        pass

    @abstractmethod
    def get(self, entry_id: str) -> Optional[Entry]:
        """Get entry by id."""
        pass

    def __len__(self) -> int:
        return len(self.list())

    def close(self) -> None:
        """Release any resources held by the store.

        Nothing to release for the in-memory store; the SQLite store overrides this.
        """
        pass
