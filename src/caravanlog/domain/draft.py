"""Draft editor domain service."""

import logging
import uuid
from datetime import date
from decimal import Decimal
from typing import Callable, Optional

from caravanlog.domain.entities import DRAFT_FIELDS, Draft, Entry
from caravanlog.domain.errors import (
    ValidationError,
    derived_field,
    plate_number_required,
    unknown_field,
    unknown_tariff,
)
from caravanlog.domain.weight import net_weight_preview
from caravanlog.utils.date_parser import parse_date_or_default
from caravanlog.utils.number_parser import parse_number, plain_number

logger = logging.getLogger(__name__)


def generate_entry_id() -> str:
    """Return a fresh opaque entry id."""
    return uuid.uuid4().hex


class DraftEditor:
    """Service holding the single in-progress record.

    The draft is either new or overwriting one existing entry by id. Field
    values stay raw text until ``submit`` turns them into an Entry.
    """

    def __init__(
        self,
        baseline_price: Decimal = Decimal("30000"),
        tariffs: Optional[dict[str, Decimal]] = None,
        today: Callable[[], date] = date.today,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        """Initialize draft editor.

        Args:
            baseline_price: Price a fresh draft starts with
            tariffs: Named prices that can be applied to the draft
            today: Provider of the current day, used for date defaults
            id_factory: Provider of ids for new entries (defaults to uuid4 hex)
        """
        self.baseline_price = baseline_price
        self.tariffs = dict(tariffs) if tariffs else {"baseline": baseline_price}
        self._today = today
        self._id_factory = id_factory or generate_entry_id
        self.draft = self._empty_draft()

    def _empty_draft(self) -> Draft:
        return Draft(
            date=self._today().isoformat(),
            price=plain_number(self.baseline_price),
        )

    @property
    def editing_id(self) -> Optional[str]:
        return self.draft.editing_id

    @property
    def is_editing(self) -> bool:
        return self.draft.is_editing

    def set_field(self, field: str, raw_value: str) -> None:
        """Replace the raw text of one draft field.

        Args:
            field: Draft field name (e.g., "plate_number", "with_load_kg")
            raw_value: Text as typed; not validated

        Raises:
            ValidationError: If the field does not exist or is computed
        """
        if field == "net_weight_kg":
            raise ValidationError(derived_field(field), field=field)
        if field not in DRAFT_FIELDS:
            raise ValidationError(unknown_field(field), field=field)
        setattr(self.draft, field, raw_value)

    def net_weight_preview(self) -> Decimal:
        """Net weight computed live from the draft's weight text."""
        return net_weight_preview(self.draft.with_load_kg, self.draft.without_load_kg)

    def begin_edit(self, entry: Entry) -> None:
        """Seed the draft from an existing entry and mark it as being edited."""
        self.draft = Draft(
            plate_number=entry.plate_number,
            with_load_kg=plain_number(entry.with_load_kg),
            without_load_kg=plain_number(entry.without_load_kg),
            date=entry.date.isoformat(),
            price=plain_number(entry.price),
            check_number=entry.check_number,
            editing_id=entry.id,
        )
        logger.debug("Editing entry %s", entry.id)

    def reset(self) -> None:
        """Clear the draft back to a new, empty record."""
        self.draft = self._empty_draft()
        logger.debug("Draft reset")

    def apply_tariff(self, name: str) -> Decimal:
        """Set the draft price to a named tariff.

        Returns:
            The applied price

        Raises:
            ValidationError: If the tariff is not configured
        """
        price = self.tariffs.get(name.strip().lower())
        if price is None:
            raise ValidationError(unknown_tariff(name, sorted(self.tariffs)), field="price")
        self.draft.price = plain_number(price)
        return price

    def submit(self) -> Entry:
        """Finalize the draft into an Entry and reset the editor.

        Malformed numbers are treated as zero and a blank or unreadable date
        as today; only a missing plate number is rejected.

        Returns:
            The finalized entry, reusing the edited id when there is one

        Raises:
            ValidationError: If the plate number is blank. The draft is left
                unchanged.
        """
        draft = self.draft
        plate_number = draft.plate_number.strip()
        if not plate_number:
            logger.info("Submit rejected: plate number missing")
            raise ValidationError(plate_number_required(), field="plate_number")

        entry = Entry(
            id=draft.editing_id or self._id_factory(),
            plate_number=plate_number,
            with_load_kg=parse_number(draft.with_load_kg),
            without_load_kg=parse_number(draft.without_load_kg),
            date=parse_date_or_default(draft.date, self._today()),
            price=parse_number(draft.price),
            check_number=draft.check_number.strip(),
        )
        logger.debug(
            "Submitted %s entry %s (net %s kg)",
            "updated" if draft.is_editing else "new",
            entry.id,
            entry.net_weight_kg,
        )
        self.reset()
        return entry
