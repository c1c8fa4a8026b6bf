"""
Money arithmetic helpers shared by the financial services.
Every division is guarded: a zero denominator yields zero.
"""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional, Union

Number = Union[Decimal, int, float, str]

ZERO = Decimal("0.00")
CENTS = Decimal("0.01")


def to_decimal(value: Optional[Number]) -> Decimal:
    """
    Coerce a value coming from the database or a request into a Decimal.

    Args:
        value: Decimal, int, float, numeric string or None

    Returns:
        Decimal value, zero for None
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    # str() keeps float values at their printed precision
    return Decimal(str(value))


def round_money(value: Number) -> Decimal:
    """Round half-up to two decimal places."""
    return to_decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def safe_divide(numerator: Number, denominator: Number) -> Decimal:
    """Divide, returning zero when the denominator is zero."""
    denominator = to_decimal(denominator)
    if denominator == 0:
        return Decimal("0")
    return to_decimal(numerator) / denominator


def percentage(part: Number, whole: Number) -> Decimal:
    """part / whole * 100 rounded to cents, zero when whole is zero."""
    return round_money(safe_divide(part, whole) * 100)


def sum_amounts(amounts: Iterable[Optional[Number]]) -> Decimal:
    """Sum amounts, treating None as zero."""
    return sum((to_decimal(amount) for amount in amounts), Decimal("0"))


def months_spanned(first: date, last: date) -> int:
    """
    Number of calendar months touched by the inclusive range [first, last].
    Two dates in the same month span one month.
    """
    if last < first:
        first, last = last, first
    return (last.year - first.year) * 12 + (last.month - first.month) + 1
