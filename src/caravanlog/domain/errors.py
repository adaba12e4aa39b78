"""Shared domain error messages and error types."""

from typing import Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic.

    Attributes:
        field: Name of the draft field that caused the failure, if any
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class NotFoundError(DomainError):
    """Requested entry does not exist."""


def plate_number_required() -> str:
    """Return message for a missing plate number."""
    return "Plate number is required"


def unknown_field(name: str) -> str:
    """Return message for a draft field that does not exist."""
    return f"Unknown field '{name}'"


def derived_field(name: str) -> str:
    """Return message for an attempt to set a computed field."""
    return f"Field '{name}' is computed from the weights and cannot be set"


def entry_not_found(reference: str) -> str:
    """Return message for a missing entry."""
    return f"Entry '{reference}' not found"


def ambiguous_entry_reference(reference: str, count: int) -> str:
    """Return message when an id prefix matches several entries."""
    return f"Entry reference '{reference}' is ambiguous: it matches {count} entries"


def unknown_tariff(name: str, available: list[str]) -> str:
    """Return message for a tariff name that is not configured."""
    return f"Unknown tariff '{name}'. Available tariffs: {', '.join(available)}"
