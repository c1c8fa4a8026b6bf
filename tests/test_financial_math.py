"""
Tests for the money arithmetic helpers.
"""

from datetime import date
from decimal import Decimal

from app.utils.financial_math import (
    months_spanned,
    percentage,
    round_money,
    safe_divide,
    sum_amounts,
    to_decimal,
)


def test_to_decimal_handles_none_and_floats():
    assert to_decimal(None) == Decimal("0")
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal("12.50") == Decimal("12.50")


def test_round_money_rounds_half_up():
    assert round_money(Decimal("2.345")) == Decimal("2.35")
    assert round_money(Decimal("2.344")) == Decimal("2.34")
    assert round_money(-Decimal("2.345")) == Decimal("-2.35")


def test_zero_denominators_yield_zero():
    assert safe_divide(10, 0) == 0
    assert percentage(Decimal("50"), Decimal("0")) == Decimal("0.00")


def test_percentage():
    assert percentage(1, 3) == Decimal("33.33")
    assert percentage(Decimal("60.00"), Decimal("100.00")) == Decimal("60.00")


def test_sum_amounts_skips_none():
    assert sum_amounts([Decimal("1.10"), None, 2]) == Decimal("3.10")
    assert sum_amounts([]) == Decimal("0")


def test_months_spanned():
    assert months_spanned(date(2024, 1, 1), date(2024, 1, 31)) == 1
    assert months_spanned(date(2024, 1, 15), date(2024, 3, 1)) == 3
    assert months_spanned(date(2023, 11, 30), date(2024, 2, 1)) == 4
    # Order of the arguments does not matter
    assert months_spanned(date(2024, 3, 1), date(2024, 1, 15)) == 3
