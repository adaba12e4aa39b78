"""Caravan session: the composition root tying the draft editor to the store.

The presentation layer drives the core only through this object. It owns
one DraftEditor, one EntryStore and the live search term, and coordinates
the two where neither can on its own (deleting the entry being edited
resets the draft).
"""

import logging
from typing import Optional, Sequence

from caravanlog.config import Settings
from caravanlog.domain import search
from caravanlog.domain.draft import DraftEditor
from caravanlog.domain.entities import Entry
from caravanlog.store.base import EntryStore
from caravanlog.store.factories import create_entry_store
from caravanlog.utils.entry_resolver import resolve_entry

logger = logging.getLogger(__name__)

NO_MATCHES_MESSAGE = "No matching records found."
EMPTY_TABLE_MESSAGE = "Add entries to populate the caravan table."


class CaravanSession:
    """Single-operator session over transient, process-local state."""

    def __init__(self, settings: Optional[Settings] = None, store: Optional[EntryStore] = None):
        """Initialize session.

        Args:
            settings: Application settings (defaults to Settings())
            store: Entry store to use (defaults to one built from settings)
        """
        self.settings = settings or Settings()
        self.store = store if store is not None else create_entry_store(self.settings.store)
        self.editor = self._new_editor()
        self.search_term = ""

    def _new_editor(self) -> DraftEditor:
        return DraftEditor(
            baseline_price=self.settings.baseline_price,
            tariffs=self.settings.tariffs,
        )

    # Draft operations
    def set_field(self, field: str, value: str) -> None:
        self.editor.set_field(field, value)

    def begin_edit(self, reference: str) -> Entry:
        """Load an entry into the draft by id or unique id prefix.

        Raises:
            NotFoundError: If the reference does not resolve to one entry
        """
        entry = resolve_entry(self.store, reference)
        self.editor.begin_edit(entry)
        return entry

    def reset(self) -> None:
        self.editor.reset()

    def submit(self) -> Entry:
        """Finalize the draft and store it.

        Raises:
            ValidationError: If the plate number is missing; the store is
                left unchanged
        """
        entry = self.editor.submit()
        self.store.upsert(entry)
        return entry

    # Store operations
    def delete(self, reference: str) -> Entry:
        """Delete an entry by id or unique id prefix.

        Resets the draft when it was editing the deleted entry.

        Raises:
            NotFoundError: If the reference does not resolve to one entry
        """
        entry = resolve_entry(self.store, reference)
        self.store.delete(entry.id)
        if self.editor.editing_id == entry.id:
            logger.debug("Deleted the entry being edited; resetting draft")
            self.editor.reset()
        return entry

    def entries(self) -> list[Entry]:
        """All entries, unfiltered."""
        return self.store.list()

    # Search
    def set_search(self, term: str) -> None:
        self.search_term = term

    def clear_search(self) -> None:
        self.search_term = ""

    @property
    def normalized_search(self) -> str:
        return search.normalize(self.search_term)

    @property
    def search_active(self) -> bool:
        return bool(self.normalized_search)

    def rows(self) -> Sequence[Entry]:
        """Entries to display for the current search term."""
        return search.filtered_list(self.store.list(), self.normalized_search)

    def status_line(self) -> str:
        """Summary shown above the table."""
        if self.search_active:
            return f"Showing {len(self.rows())} result(s)"
        return f"Total entries: {len(self.store)}"

    def empty_message(self) -> str:
        """Message shown when there are no rows to display."""
        return NO_MATCHES_MESSAGE if self.search_active else EMPTY_TABLE_MESSAGE

    # Presentation commands
    def reload(self) -> None:
        """Drop all transient state, as a full page reload would."""
        self.store.close()
        self.store = create_entry_store(self.settings.store)
        self.editor = self._new_editor()
        self.search_term = ""
        logger.info("Session reloaded; all entries discarded")

    def close(self) -> None:
        self.store.close()
