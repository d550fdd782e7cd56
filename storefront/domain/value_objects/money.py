"""Monetary amounts."""
from decimal import ROUND_HALF_UP, Decimal

# Storage keeps two decimal places (Numeric(10, 2))
CENT = Decimal("0.01")


def to_amount(value) -> Decimal:
    """
    Convert a price or total to a Decimal rounded to whole cents.

    Ints, floats and strings are accepted; floats go through str() so
    0.1 stays 0.10 and not its binary expansion.
    """
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENT, rounding=ROUND_HALF_UP)
