"""
Money Utilities - Decimal operations for prices.

Prices come from Postgres `numeric` columns and from JSON bodies as floats;
everything is normalized to Decimal before arithmetic.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Union

from storefront import config

Number = Union[str, int, float, Decimal, None]

# Display precision (2 decimal places)
MONEY_PRECISION = Decimal("0.01")


def to_decimal(value: Number) -> Decimal:
    """
    Convert any value to Decimal safely.

    Floats go through their string form so 0.1 stays 0.1.
    Returns Decimal("0") for None or unparseable input.
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value

    try:
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def round_money(value: Number) -> Decimal:
    """Round to two decimals, half up."""
    return to_decimal(value).quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def format_money(value: Number, prefix: str | None = None) -> str:
    """Format a price for display, e.g. `S/ 12.50`."""
    prefix = config.CURRENCY_PREFIX if prefix is None else prefix
    return f"{prefix} {round_money(value):.2f}"


def to_float(value: Number) -> float:
    """Convert to float for JSON responses. Use only at API boundaries."""
    return float(to_decimal(value))


def multiply(value: Number, factor: Number) -> Decimal:
    """Multiply a price by a quantity or factor."""
    return to_decimal(value) * to_decimal(factor)
