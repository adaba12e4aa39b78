"""Table rendering for caravan entries."""

from decimal import Decimal
from typing import Sequence

import click

from caravanlog.domain import search
from caravanlog.domain.entities import Entry, HighlightedText
from caravanlog.utils.number_parser import format_grouped

SHORT_ID_LENGTH = 8
EMPTY_CHECK_NUMBER = "—"

COLUMNS = [
    "ID",
    "Plate Number",
    "With Load (Kg)",
    "Date",
    "Without Load (Kg)",
    "Net Weight (Kg)",
    "Price",
    "Check No.",
]


def short_id(entry: Entry) -> str:
    return entry.id[:SHORT_ID_LENGTH]


def _display_values(entry: Entry) -> list:
    return [
        entry.plate_number,
        entry.with_load_kg,
        entry.date,
        entry.without_load_kg,
        entry.net_weight_kg,
        entry.price,
        entry.check_number or EMPTY_CHECK_NUMBER,
    ]


def row_cells(entry: Entry, term: str) -> list[HighlightedText]:
    """Build the display cells of one row.

    Matching rows show every field in plain form with the matched segment
    marked; other rows show numbers digit-grouped.
    """
    cells = [HighlightedText(short_id(entry))]
    if search.matches(entry, term):
        cells.extend(search.highlight(value, term) for value in _display_values(entry))
        return cells

    for value in _display_values(entry):
        if isinstance(value, Decimal):
            cells.append(HighlightedText(format_grouped(value)))
        else:
            cells.append(HighlightedText(search.field_text(value)))
    return cells


def style_cell(cell: HighlightedText, color: bool = True) -> str:
    """Render a cell, emphasizing the highlighted segment."""
    if not cell.is_highlighted or not color:
        return cell.text
    return f"{cell.prefix}{click.style(cell.match, fg='red', bold=True)}{cell.suffix}"


def render_table(entries: Sequence[Entry], term: str = "", color: bool = True) -> list[str]:
    """Render entries as aligned text lines, header first."""
    rows = [row_cells(entry, term) for entry in entries]
    widths = [len(column) for column in COLUMNS]
    for cells in rows:
        for index, cell in enumerate(cells):
            widths[index] = max(widths[index], len(cell.text))

    header = "  ".join(column.ljust(widths[i]) for i, column in enumerate(COLUMNS))
    lines = [header, "-" * len(header)]
    for cells in rows:
        parts = []
        for index, cell in enumerate(cells):
            padding = " " * (widths[index] - len(cell.text))
            parts.append(style_cell(cell, color=color) + padding)
        lines.append("  ".join(parts).rstrip())
    return lines
