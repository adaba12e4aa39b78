"""Number parsing and formatting utilities."""

import math
import re
from decimal import Decimal, InvalidOperation
from typing import Optional

# Plain decimal notation with an optional exponent: "40000", "-1.5", ".5", "1e3"
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_finite_number(text: Optional[str]) -> Optional[Decimal]:
    """Parse raw form text into a Decimal.

    Blank text counts as zero. Anything else must be a plain decimal
    number; grouping separators, currency symbols and words such as
    "Infinity" or "NaN" are not numbers. Values too large for a double
    are not finite, and values too small for one are zero.

    Args:
        text: Raw text as typed

    Returns:
        Decimal value, or None if the text is not a finite number
    """
    if text is None:
        return None

    text = text.strip()
    if not text:
        return Decimal("0")

    if not _NUMBER_RE.fullmatch(text):
        return None

    try:
        value = Decimal(text)
    except InvalidOperation:
        return None

    if not value.is_finite():
        return None

    # Limited to the range of a double; larger exponents overflow arithmetic
    as_float = float(value)
    if not math.isfinite(as_float):
        return None
    if as_float == 0:
        return Decimal("0")
    return value


def parse_number(text: Optional[str]) -> Decimal:
    """Parse raw form text into a Decimal, treating malformed input as zero."""
    value = parse_finite_number(text)
    if value is None:
        return Decimal("0")
    return value


def plain_number(value: Decimal) -> str:
    """Render a number in plain decimal form ("40000", "1.5").

    This is the form used for searching and for editing, never grouped.
    """
    if value == 0:
        return "0"
    return format(value.normalize(), "f")


def format_grouped(value: Decimal) -> str:
    """Render a number with digit grouping ("40,000")."""
    if value == 0:
        return "0"
    return format(value.normalize(), ",f")
