"""Utility functions for caravanlog."""

from caravanlog.utils.date_parser import parse_date
from caravanlog.utils.number_parser import parse_number, plain_number, format_grouped

__all__ = ["parse_date", "parse_number", "plain_number", "format_grouped"]
