"""Entry search and match highlighting.

A search term is normalized by trimming and lowercasing it; an empty term
means search is inactive. Every function here normalizes its term argument,
so raw and already-normalized terms behave the same.
"""

from collections.abc import Iterable, Sequence
from datetime import date
from decimal import Decimal
from typing import Union

from caravanlog.domain.entities import Entry, HighlightedText
from caravanlog.utils.number_parser import plain_number

FieldValue = Union[str, Decimal, date, int]


def normalize(term: str) -> str:
    """Trim and lowercase a raw search term."""
    return term.strip().lower()


def field_text(value: FieldValue) -> str:
    """Return the plain string form of a field, as used for searching."""
    if isinstance(value, Decimal):
        return plain_number(value)
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def search_fields(entry: Entry) -> list[str]:
    """Return the searchable fields of an entry in fixed order."""
    return [
        entry.plate_number,
        field_text(entry.date),
        field_text(entry.price),
        field_text(entry.with_load_kg),
        field_text(entry.without_load_kg),
        field_text(entry.net_weight_kg),
        entry.check_number,
    ]


def search_blob(entry: Entry) -> str:
    """Join the searchable fields into one lowercase text."""
    return " ".join(search_fields(entry)).lower()


def matches(entry: Entry, term: str) -> bool:
    """Whether the term occurs anywhere in the entry's search text.

    Nothing matches an inactive (empty) term.
    """
    term = normalize(term)
    if not term:
        return False
    return term in search_blob(entry)


def filtered_list(entries: Iterable[Entry], term: str) -> Sequence[Entry]:
    """Return the entries to show for a search term.

    An inactive term returns the entries unchanged; otherwise only matching
    entries are kept, in their original order.
    """
    term = normalize(term)
    if not term:
        return entries if isinstance(entries, Sequence) else list(entries)
    return [entry for entry in entries if matches(entry, term)]


def highlight(value: FieldValue, term: str) -> HighlightedText:
    """Split a displayed field around the first occurrence of the term.

    Each field is highlighted on its own, so a matching row may have
    fields without any highlighted segment.
    """
    text = field_text(value)
    term = normalize(term)
    if not term:
        return HighlightedText(text)

    index = text.lower().find(term)
    if index == -1:
        return HighlightedText(text)

    end = index + len(term)
    return HighlightedText(text[:index], text[index:end], text[end:])
