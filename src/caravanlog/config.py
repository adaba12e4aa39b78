"""Configuration settings for caravanlog.

Settings come from environment variables; CLI options override them.
"""

import os
from dataclasses import dataclass
from decimal import Decimal
from typing import Mapping, Optional

from caravanlog.domain.errors import ValidationError
from caravanlog.store.factories import STORE_BACKENDS
from caravanlog.utils.number_parser import parse_finite_number

DEFAULT_BASELINE_PRICE = Decimal("30000")
DEFAULT_PREMIUM_PRICE = Decimal("40000")
DEFAULT_STORE = "memory"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Application settings."""

    baseline_price: Decimal = DEFAULT_BASELINE_PRICE
    premium_price: Decimal = DEFAULT_PREMIUM_PRICE
    store: str = DEFAULT_STORE
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def tariffs(self) -> dict[str, Decimal]:
        """Named tariffs an operator can apply to the draft price."""
        return {"baseline": self.baseline_price, "premium": self.premium_price}


def _price_setting(name: str, raw: Optional[str], default: Decimal) -> Decimal:
    if raw is None or not raw.strip():
        return default
    value = parse_finite_number(raw)
    if value is None or value < 0:
        raise ValidationError(f"{name} must be a non-negative number, got '{raw}'")
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Load settings from environment variables.

    Recognized variables: CARAVANLOG_BASELINE_PRICE, CARAVANLOG_PREMIUM_PRICE,
    CARAVANLOG_STORE and CARAVANLOG_LOG_LEVEL.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        Settings instance

    Raises:
        ValidationError: If a price variable is not a non-negative number or
            the store backend is unknown
    """
    if environ is None:
        environ = os.environ

    store = environ.get("CARAVANLOG_STORE") or DEFAULT_STORE
    if store not in STORE_BACKENDS:
        raise ValidationError(
            f"CARAVANLOG_STORE must be one of {', '.join(STORE_BACKENDS)}, got '{store}'"
        )

    return Settings(
        baseline_price=_price_setting(
            "CARAVANLOG_BASELINE_PRICE",
            environ.get("CARAVANLOG_BASELINE_PRICE"),
            DEFAULT_BASELINE_PRICE,
        ),
        premium_price=_price_setting(
            "CARAVANLOG_PREMIUM_PRICE",
            environ.get("CARAVANLOG_PREMIUM_PRICE"),
            DEFAULT_PREMIUM_PRICE,
        ),
        store=store,
        log_level=(environ.get("CARAVANLOG_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    )
