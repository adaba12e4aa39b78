"""Net weight computation."""

from decimal import Decimal

from caravanlog.utils.number_parser import parse_finite_number

ZERO = Decimal("0")


def net_weight(with_load: Decimal, without_load: Decimal) -> Decimal:
    """Return gross minus tare, floored at zero."""
    return max(with_load - without_load, ZERO)


def net_weight_preview(with_load_text: str, without_load_text: str) -> Decimal:
    """Compute the net weight from raw draft text.

    Returns zero when either input does not parse as a finite number.

    Args:
        with_load_text: Raw gross weight text
        without_load_text: Raw tare weight text

    Returns:
        Net weight the entry will carry once submitted
    """
    with_load = parse_finite_number(with_load_text)
    without_load = parse_finite_number(without_load_text)
    if with_load is None or without_load is None:
        return ZERO
    return net_weight(with_load, without_load)
