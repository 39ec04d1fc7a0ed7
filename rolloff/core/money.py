"""
Money helpers.

All amounts are integer cents. Fractional intermediate values (tons, rates)
are carried as Decimal and only collapsed to cents through ceil_cents or
round_cents, never through float arithmetic.
"""
from decimal import Decimal, ROUND_CEILING, ROUND_HALF_UP
from typing import Optional, Union

from rolloff.config import settings


Number = Union[int, float, str, Decimal]

CENTS_PER_DOLLAR = 100


def to_decimal(value: Number) -> Decimal:
    """
    Convert a number to Decimal without picking up binary float noise.

    Floats go through str() so 1.1 becomes Decimal("1.1"), not
    Decimal("1.100000000000000088817841970012523233890533447265625").
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def ceil_cents(amount: Decimal) -> int:
    """Round a fractional cent amount up to the next whole cent."""
    return int(amount.quantize(Decimal("1"), rounding=ROUND_CEILING))


def round_cents(amount: Decimal) -> int:
    """Round a fractional cent amount to the nearest cent (half away from zero)."""
    return int(amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_cents(cents: int, symbol: Optional[str] = None) -> str:
    """
    Format cents as a currency string for display.

    Examples:
        39900  -> "$399.00"
        125000 -> "$1,250.00"
        -500   -> "-$5.00"
    """
    symbol = settings.CURRENCY_SYMBOL if symbol is None else symbol
    sign = "-" if cents < 0 else ""
    dollars = Decimal(abs(cents)) / CENTS_PER_DOLLAR
    return f"{sign}{symbol}{dollars:,.2f}"
