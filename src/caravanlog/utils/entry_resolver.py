"""Utility for resolving entry references to entries."""

from caravanlog.domain.entities import Entry
from caravanlog.domain.errors import (
    NotFoundError,
    ambiguous_entry_reference,
    entry_not_found,
)
from caravanlog.store.base import EntryStore


def resolve_entry(store: EntryStore, reference: str) -> Entry:
    """Resolve a full entry id or a unique id prefix to an entry.

    Args:
        store: EntryStore instance
        reference: Full id or leading part of an id

    Returns:
        The matching entry

    Raises:
        NotFoundError: If nothing matches or the prefix is ambiguous
    """
    reference = reference.strip()
    if not reference:
        raise NotFoundError(entry_not_found(reference))

    entry = store.get(reference)
    if entry is not None:
        return entry

    candidates = [e for e in store.list() if e.id.startswith(reference)]
    if not candidates:
        raise NotFoundError(entry_not_found(reference))
    if len(candidates) > 1:
        raise NotFoundError(ambiguous_entry_reference(reference, len(candidates)))
    return candidates[0]
