"""Mapper functions to convert between domain entries and SQLAlchemy rows."""

from decimal import Decimal

from caravanlog.domain import entities as domain
from caravanlog.store.models import EntryRow


def entry_to_domain(row: EntryRow) -> domain.Entry:
    """Convert SQLAlchemy EntryRow to domain Entry entity."""
    return domain.Entry(
        id=row.id,
        plate_number=row.plate_number,
        with_load_kg=Decimal(row.with_load_kg),
        without_load_kg=Decimal(row.without_load_kg),
        date=row.date,
        price=Decimal(row.price),
        check_number=row.check_number or "",
    )


def apply_entry_to_row(entry: domain.Entry, row: EntryRow) -> EntryRow:
    """Copy every field of a domain Entry onto a row, leaving its position alone."""
    row.id = entry.id
    row.plate_number = entry.plate_number
    row.with_load_kg = str(entry.with_load_kg)
    row.without_load_kg = str(entry.without_load_kg)
    row.date = entry.date
    row.price = str(entry.price)
    row.check_number = entry.check_number
    return row
