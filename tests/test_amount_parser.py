"""Tests for amount validation."""

from decimal import Decimal

import pytest

from spendbook.domain.errors import AmountExceedsMaximumError, InvalidAmountError
from spendbook.utils.amount_parser import (
    MAX_AMOUNT,
    parse_amount,
    validate_amount,
    validate_balance,
)


@pytest.mark.parametrize("value", [None, ""])
def test_validate_amount_missing_is_zero(value):
    assert validate_amount(value) == "0.00"


@pytest.mark.parametrize(
    "value,expected",
    [
        ("100", "100.00"),
        ("100.00", "100.00"),
        ("1,234.5", "1234.50"),
        ("1,234,567.891", "1234567.89"),
        ("  42.1 ", "42.10"),
        ("0", "0.00"),
        (12, "12.00"),
        (0.1, "0.10"),
        (Decimal("7.005"), "7.01"),
    ],
)
def test_validate_amount_formats(value, expected):
    assert validate_amount(value) == expected


def test_validate_amount_is_idempotent():
    once = validate_amount("1,234.5")
    assert validate_amount(once) == once


@pytest.mark.parametrize("value", ["-5", "abc", "12abc", "NaN", "Infinity", -1])
def test_validate_amount_rejects_invalid(value):
    with pytest.raises(InvalidAmountError) as excinfo:
        validate_amount(value)
    assert "Invalid amount" in str(excinfo.value)


def test_validate_amount_rejects_over_maximum():
    with pytest.raises(AmountExceedsMaximumError) as excinfo:
        validate_amount("1000000000000")
    assert str(excinfo.value) == "Amount exceeds maximum allowed value"


def test_validate_amount_accepts_maximum():
    assert validate_amount(str(MAX_AMOUNT)) == "999999999999.99"


def test_validate_amount_negative_zero():
    assert validate_amount("-0") == "0.00"


def test_parse_amount_positive():
    assert parse_amount("1,000.5") == Decimal("1000.50")


@pytest.mark.parametrize("value", ["", "0", "-3", "x"])
def test_parse_amount_rejects(value):
    with pytest.raises(InvalidAmountError):
        parse_amount(value)


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, Decimal("0.00")),
        ("  ", Decimal("0.00")),
        ("1500", Decimal("1500.00")),
        ("-250.5", Decimal("-250.50")),
        ("-0", Decimal("0.00")),
        ("1,234.567", Decimal("1234.57")),
        (-12, Decimal("-12.00")),
    ],
)
def test_validate_balance(value, expected):
    assert validate_balance(value) == expected


@pytest.mark.parametrize("value", ["abc", "12abc", "nan", "-inf"])
def test_validate_balance_rejects_invalid(value):
    with pytest.raises(InvalidAmountError) as excinfo:
        validate_balance(value)
    assert str(excinfo.value) == "Balance must be a valid number"


@pytest.mark.parametrize("value", ["1000000000000", "-1000000000000"])
def test_validate_balance_rejects_over_maximum(value):
    with pytest.raises(AmountExceedsMaximumError) as excinfo:
        validate_balance(value)
    assert str(excinfo.value) == "Balance exceeds maximum allowed value"
