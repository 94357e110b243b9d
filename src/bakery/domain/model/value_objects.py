"""Value Objects and coercion helpers shared across the domain.

Value Objects are immutable and compared by value, not identity.
The ``coerce_*`` / ``parse_*`` helpers are total: they turn any JSON-like
input into a safe value instead of raising.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from bakery.domain.exceptions import ValidationError

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


@dataclass(frozen=True)
class Money:
    """A Decimal amount in Brazilian reais, displayed pt-BR style.

    Totals are computed as plain Decimals; this only presents them.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        # pt-BR style: "R$ 1.234,50"
        text = f"{self.amount:,.2f}"
        text = text.replace(",", "_").replace(".", ",").replace("_", ".")
        return f"R$ {text}"


def coerce_quantity(value: object) -> int:
    """Turn any input into a non-negative integer quantity.

    Numbers and numeric strings are truncated toward zero; everything else
    (None, booleans, NaN, garbage text, negatives) becomes 0.
    """
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            value = float(text)
        except ValueError:
            return 0
    if isinstance(value, int):
        return max(value, 0)
    if isinstance(value, float):
        if not math.isfinite(value):
            return 0
        return max(int(value), 0)
    return 0


def parse_request_date(value: object) -> date | None:
    """Parse a ``YYYY-MM-DD`` string, returning None for anything else."""
    if not isinstance(value, str) or not _ISO_DATE.fullmatch(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None
