"""Decimal helpers for monetary values."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")
ZERO = Decimal(0)


def to_decimal(value) -> Decimal:
    """Convert int/float/str/Decimal to a finite Decimal.

    Floats go through repr() so 0.1 becomes Decimal("0.1") rather than
    the exact binary expansion.
    """
    if isinstance(value, bool):
        raise ValueError(f"not a number: {value!r}")
    if isinstance(value, float):
        value = repr(value)
    try:
        d = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise ValueError(f"not a number: {value!r}") from None
    if not d.is_finite():
        raise ValueError(f"not a finite number: {value!r}")
    return d


def quantize_money(value: Decimal) -> Decimal:
    """Round to cents (half up). Negative zero becomes 0.00."""
    q = value.quantize(CENT, rounding=ROUND_HALF_UP)
    if q == ZERO:
        return ZERO.quantize(CENT)
    return q


def format_money(value: Decimal) -> str:
    """Decimal → "1234.50" (no separators, no prefix)"""
    return f"{quantize_money(value):f}"
