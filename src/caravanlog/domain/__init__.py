"""Domain layer for caravanlog application."""

from caravanlog.domain.draft import DraftEditor
from caravanlog.domain.entities import Draft, Entry, HighlightedText
from caravanlog.domain.errors import DomainError, NotFoundError, ValidationError

__all__ = [
    "DraftEditor",
    "Draft",
    "Entry",
    "HighlightedText",
    "DomainError",
    "NotFoundError",
    "ValidationError",
]
