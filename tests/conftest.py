"""Shared pytest fixtures for caravanlog tests."""

import itertools
from datetime import date
from decimal import Decimal

import pytest

from caravanlog.config import Settings
from caravanlog.domain.draft import DraftEditor
from caravanlog.domain.entities import Entry
from caravanlog.session import CaravanSession
from caravanlog.store.factories import STORE_BACKENDS, create_entry_store

TODAY = date(2024, 1, 15)


@pytest.fixture(params=STORE_BACKENDS)
def store(request):
    """Create an empty entry store, once per backend."""
    entry_store = create_entry_store(request.param)
    yield entry_store
    entry_store.close()


@pytest.fixture
def editor():
    """Create a DraftEditor with a fixed day and predictable ids."""
    counter = itertools.count(1)
    return DraftEditor(
        baseline_price=Decimal("30000"),
        tariffs={"baseline": Decimal("30000"), "premium": Decimal("40000")},
        today=lambda: TODAY,
        id_factory=lambda: f"entry-{next(counter)}",
    )


@pytest.fixture
def session():
    """Create a CaravanSession over the default in-memory store."""
    caravan_session = CaravanSession(Settings())
    yield caravan_session
    caravan_session.close()


@pytest.fixture
def make_entry():
    """Return a factory for Entry objects with sensible defaults."""

    def _make_entry(
        id: str = "entry-1",
        plate_number: str = "34Z 999 FA",
        with_load_kg: str = "40000",
        without_load_kg: str = "32000",
        entry_date: date = TODAY,
        price: str = "30000",
        check_number: str = "",
    ) -> Entry:
        return Entry(
            id=id,
            plate_number=plate_number,
            with_load_kg=Decimal(with_load_kg),
            without_load_kg=Decimal(without_load_kg),
            date=entry_date,
            price=Decimal(price),
            check_number=check_number,
        )

    return _make_entry


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
