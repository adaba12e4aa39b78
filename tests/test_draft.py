"""Tests for the draft editor."""

import pytest
from datetime import date
from decimal import Decimal

from caravanlog.domain.draft import DraftEditor, generate_entry_id
from caravanlog.domain.errors import ValidationError
from caravanlog.domain.search import matches, search_blob

TODAY = date(2024, 1, 15)


def fill(editor, **fields):
    for field, value in fields.items():
        editor.set_field(field, value)


class TestReset:
    """Tests for draft defaults and reset."""

    def test_new_draft_defaults(self, editor):
        """Test that a fresh draft has today's date and the baseline price."""
        draft = editor.draft
        assert draft.plate_number == ""
        assert draft.with_load_kg == ""
        assert draft.without_load_kg == ""
        assert draft.date == "2024-01-15"
        assert draft.price == "30000"
        assert draft.check_number == ""
        assert editor.editing_id is None

    def test_reset_clears_fields_and_edit_mode(self, editor, make_entry):
        editor.begin_edit(make_entry())
        editor.set_field("check_number", "CHK-1")

        editor.reset()

        assert editor.draft.plate_number == ""
        assert editor.draft.check_number == ""
        assert editor.draft.price == "30000"
        assert not editor.is_editing


class TestSetField:
    """Tests for field edits."""

    def test_set_field_stores_raw_text(self, editor):
        editor.set_field("with_load_kg", "not a number")
        assert editor.draft.with_load_kg == "not a number"

    def test_set_field_updates_preview(self, editor):
        """Test that the net weight preview follows every weight edit."""
        editor.set_field("with_load_kg", "40000")
        assert editor.net_weight_preview() == Decimal("40000")

        editor.set_field("without_load_kg", "32000")
        assert editor.net_weight_preview() == Decimal("8000")

        editor.set_field("without_load_kg", "x")
        assert editor.net_weight_preview() == Decimal("0")

    def test_set_unknown_field(self, editor):
        with pytest.raises(ValidationError) as excinfo:
            editor.set_field("colour", "red")
        assert excinfo.value.field == "colour"

    def test_set_net_weight_rejected(self, editor):
        """Test that the computed net weight cannot be set directly."""
        with pytest.raises(ValidationError, match="computed"):
            editor.set_field("net_weight_kg", "100")


class TestBeginEdit:
    """Tests for seeding the draft from an entry."""

    def test_begin_edit_seeds_every_field(self, editor, make_entry):
        entry = make_entry(
            id="abc",
            with_load_kg="40000.0",
            price="30000",
            check_number="CHK-2024-001",
            entry_date=date(2023, 12, 1),
        )

        editor.begin_edit(entry)

        draft = editor.draft
        assert draft.plate_number == "34Z 999 FA"
        assert draft.with_load_kg == "40000"
        assert draft.without_load_kg == "32000"
        assert draft.date == "2023-12-01"
        assert draft.price == "30000"
        assert draft.check_number == "CHK-2024-001"
        assert editor.editing_id == "abc"
        assert editor.net_weight_preview() == entry.net_weight_kg


class TestSubmit:
    """Tests for submitting the draft."""

    def test_submit_new_entry(self, editor):
        fill(
            editor,
            plate_number="  34Z 999 FA ",
            with_load_kg="40000",
            without_load_kg="32000",
            price="30000",
            check_number=" CHK-1 ",
        )

        entry = editor.submit()

        assert entry.id == "entry-1"
        assert entry.plate_number == "34Z 999 FA"
        assert entry.with_load_kg == Decimal("40000")
        assert entry.without_load_kg == Decimal("32000")
        assert entry.net_weight_kg == Decimal("8000")
        assert entry.date == TODAY
        assert entry.price == Decimal("30000")
        assert entry.check_number == "CHK-1"

    def test_submit_resets_draft(self, editor):
        fill(editor, plate_number="34Z 999 FA", with_load_kg="40000")
        editor.submit()

        assert editor.draft.plate_number == ""
        assert editor.draft.with_load_kg == ""
        assert not editor.is_editing

    def test_submit_generates_fresh_ids(self, editor):
        editor.set_field("plate_number", "A")
        first = editor.submit()
        editor.set_field("plate_number", "B")
        second = editor.submit()
        assert first.id != second.id

    @pytest.mark.parametrize("plate", ["", "   ", "\t\n"])
    def test_submit_requires_plate_number(self, editor, plate):
        """Test that a blank plate fails and leaves the draft unchanged."""
        fill(editor, plate_number=plate, with_load_kg="40000", without_load_kg="32000")
        before = (editor.draft.plate_number, editor.draft.with_load_kg, editor.draft.without_load_kg)

        with pytest.raises(ValidationError) as excinfo:
            editor.submit()

        assert excinfo.value.field == "plate_number"
        after = (editor.draft.plate_number, editor.draft.with_load_kg, editor.draft.without_load_kg)
        assert after == before

    def test_submit_failure_keeps_edit_mode(self, editor, make_entry):
        editor.begin_edit(make_entry(id="abc"))
        editor.set_field("plate_number", " ")

        with pytest.raises(ValidationError):
            editor.submit()

        assert editor.editing_id == "abc"

    def test_submit_coerces_malformed_numbers_to_zero(self, editor):
        """Test that non-numeric weights and price become zero instead of failing."""
        fill(
            editor,
            plate_number="34Z 999 FA",
            with_load_kg="40000",
            without_load_kg="heavy",
            price="free",
        )

        entry = editor.submit()

        assert entry.without_load_kg == Decimal("0")
        assert entry.net_weight_kg == Decimal("40000")
        assert entry.price == Decimal("0")

    def test_submit_out_of_range_numbers_are_zero(self, editor):
        fill(
            editor,
            plate_number="34Z 999 FA",
            with_load_kg="1e1000000",
            without_load_kg="0",
            price="1e200000",
        )
        assert editor.net_weight_preview() == Decimal("0")

        entry = editor.submit()

        assert entry.with_load_kg == Decimal("0")
        assert entry.net_weight_kg == Decimal("0")
        assert entry.price == Decimal("0")
        assert len(search_blob(entry)) < 100
        assert not matches(entry, "999999")

    def test_submit_blank_weights_are_zero(self, editor):
        editor.set_field("plate_number", "34Z 999 FA")
        entry = editor.submit()
        assert entry.with_load_kg == Decimal("0")
        assert entry.without_load_kg == Decimal("0")
        assert entry.net_weight_kg == Decimal("0")

    def test_submit_floors_net_weight(self, editor):
        fill(editor, plate_number="34Z 999 FA", with_load_kg="30000", without_load_kg="32000")
        assert editor.submit().net_weight_kg == Decimal("0")

    def test_submit_preview_agrees_with_entry(self, editor):
        fill(editor, plate_number="34Z 999 FA", with_load_kg="40000", without_load_kg="35000")
        preview = editor.net_weight_preview()
        assert editor.submit().net_weight_kg == preview

    def test_submit_parses_date(self, editor):
        fill(editor, plate_number="34Z 999 FA", date="2023-12-01")
        assert editor.submit().date == date(2023, 12, 1)

    def test_submit_relative_date(self, editor):
        fill(editor, plate_number="34Z 999 FA", date="yesterday")
        assert editor.submit().date == date(2024, 1, 14)

    def test_submit_unreadable_date_defaults_to_today(self, editor):
        fill(editor, plate_number="34Z 999 FA", date="banana")
        assert editor.submit().date == TODAY

    def test_submit_while_editing_reuses_id(self, editor, make_entry):
        editor.begin_edit(make_entry(id="abc"))
        editor.set_field("without_load_kg", "35000")

        entry = editor.submit()

        assert entry.id == "abc"
        assert entry.net_weight_kg == Decimal("5000")
        assert not editor.is_editing


class TestTariff:
    """Tests for applying named tariffs."""

    def test_apply_premium_tariff(self, editor):
        assert editor.apply_tariff("premium") == Decimal("40000")
        assert editor.draft.price == "40000"

    def test_apply_tariff_is_case_insensitive(self, editor):
        editor.apply_tariff(" Baseline ")
        assert editor.draft.price == "30000"

    def test_apply_unknown_tariff(self, editor):
        with pytest.raises(ValidationError, match="Available tariffs: baseline, premium"):
            editor.apply_tariff("gold")


def test_default_editor_uses_real_ids_and_today():
    editor = DraftEditor()
    editor.set_field("plate_number", "34Z 999 FA")
    entry = editor.submit()
    assert entry.date == date.today()
    assert len(entry.id) == 32


def test_generate_entry_id_is_unique():
    assert generate_entry_id() != generate_entry_id()
