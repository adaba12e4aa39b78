"""List-backed entry store."""

import logging
from typing import Optional

from caravanlog.domain.entities import Entry
from caravanlog.store.base import EntryStore

logger = logging.getLogger(__name__)


class InMemoryEntryStore(EntryStore):
    """Entry store holding entries in a plain list, front = most recent."""

    def __init__(self):
        self._entries: list[Entry] = []

    def _index_of(self, entry_id: str) -> Optional[int]:
        for index, entry in enumerate(self._entries):
            if entry.id == entry_id:
                return index
        return None

    def upsert(self, entry: Entry) -> None:
        index = self._index_of(entry.id)
        if index is None:
            self._entries.insert(0, entry)
            logger.debug("Inserted entry %s", entry.id)
        else:
            self._entries[index] = entry
            logger.debug("Replaced entry %s at position %d", entry.id, index)

    def delete(self, entry_id: str) -> None:
        index = self._index_of(entry_id)
        if index is None:
            logger.debug("Delete of unknown entry %s ignored", entry_id)
            return
        del self._entries[index]
        logger.debug("Deleted entry %s", entry_id)

    def list(self) -> list[Entry]:
        return list(self._entries)

    def get(self, entry_id: str) -> Optional[Entry]:
        index = self._index_of(entry_id)
        if index is None:
            return None
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)
