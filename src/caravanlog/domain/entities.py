"""Domain model entities for caravanlog.

These are pure data classes representing weighbridge records, independent of
how the store keeps them. The net weight is never stored: it is always
computed from the two weights so the two can never disagree.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional

from caravanlog.domain.weight import net_weight


@dataclass(frozen=True)
class Entry:
    """Finalized weighbridge record."""

    id: str
    plate_number: str
    with_load_kg: Decimal
    without_load_kg: Decimal
    date: date
    price: Decimal
    check_number: str = ""

    @property
    def net_weight_kg(self) -> Decimal:
        """Gross minus tare, floored at zero."""
        return net_weight(self.with_load_kg, self.without_load_kg)


@dataclass
class Draft:
    """Editable working copy of an entry.

    All fields hold raw text exactly as typed; nothing is validated until
    the draft is submitted.
    """

    plate_number: str = ""
    with_load_kg: str = ""
    without_load_kg: str = ""
    date: str = ""
    price: str = ""
    check_number: str = ""
    editing_id: Optional[str] = field(default=None)

    @property
    def is_editing(self) -> bool:
        """Whether submitting this draft overwrites an existing entry."""
        return self.editing_id is not None


# Raw text fields of a draft, in form order.
DRAFT_FIELDS = (
    "plate_number",
    "with_load_kg",
    "without_load_kg",
    "date",
    "price",
    "check_number",
)


@dataclass(frozen=True)
class HighlightedText:
    """A displayed field split around the first match of the search term."""

    prefix: str
    match: str = ""
    suffix: str = ""

    @property
    def is_highlighted(self) -> bool:
        return bool(self.match)

    @property
    def text(self) -> str:
        """The full, unchanged field text."""
        return f"{self.prefix}{self.match}{self.suffix}"
