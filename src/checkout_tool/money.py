"""Decimal helpers for monetary values."""
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

CENT = Decimal("0.01")
ZERO = Decimal("0")


def to_decimal(value) -> Decimal:
    """Convert int/float/str/Decimal to Decimal (floats go through str)."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        value = str(value)
    try:
        return Decimal(value)
    except (InvalidOperation, TypeError):
        raise ValueError(f"Not a monetary value: {value!r}") from None


def round2(value) -> Decimal:
    """Round to 2 fraction digits, half away from zero."""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)
