"""Amount parsing utilities.

Amounts are handled as ``Decimal`` end to end and rendered as fixed-point
strings with two fractional digits.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

from spendbook.domain.errors import (
    AMOUNT_EXCEEDS_MAXIMUM,
    BALANCE_EXCEEDS_MAXIMUM,
    INVALID_BALANCE,
    AmountExceedsMaximumError,
    InvalidAmountError,
    invalid_amount,
)

MAX_AMOUNT = Decimal("999999999999.99")
CENTS = Decimal("0.01")

AmountInput = Union[str, int, float, Decimal, None]


def _to_decimal(amount: AmountInput, signed: bool = False) -> Decimal:
    if isinstance(amount, bool):
        raise InvalidAmountError(invalid_amount(amount))
    if isinstance(amount, str):
        text = amount.replace(",", "").strip()
    elif isinstance(amount, float):
        # repr keeps the shortest round-tripping form, e.g. 0.1 -> "0.1"
        text = repr(amount)
    else:
        text = str(amount)

    try:
        value = Decimal(text)
    except (InvalidOperation, ValueError):
        raise InvalidAmountError(invalid_amount(amount)) from None

    if not value.is_finite() or (value < 0 and not signed):
        raise InvalidAmountError(invalid_amount(amount))
    if abs(value) > MAX_AMOUNT:
        raise AmountExceedsMaximumError(AMOUNT_EXCEEDS_MAXIMUM)
    return value


def validate_amount(amount: AmountInput) -> str:
    """Validate a statement amount and normalize it to a fixed-point string.

    Handles:
    - None or "" -> "0.00"
    - "123.4" -> "123.40"
    - "1,234.5" -> "1234.50" (grouping commas are ignored)
    - numbers (int, float, Decimal)

    Args:
        amount: Raw amount value from a CSV cell

    Returns:
        Amount with exactly two fractional digits, as a string

    Raises:
        InvalidAmountError: If the value is not a finite, non-negative number
        AmountExceedsMaximumError: If the magnitude exceeds MAX_AMOUNT
    """
    if amount is None or amount == "":
        return "0.00"

    value = _to_decimal(amount)
    if value == 0:
        # Drop the sign of negative zero
        value = Decimal(0)
    return str(value.quantize(CENTS, rounding=ROUND_HALF_UP))


def parse_amount(amount_str: str) -> Decimal:
    """Parse a manually entered amount into a positive Decimal.

    Unlike ``validate_amount``, an empty value or zero is rejected.

    Raises:
        InvalidAmountError: If the amount is missing, malformed, or not positive
        AmountExceedsMaximumError: If the magnitude exceeds MAX_AMOUNT
    """
    if amount_str is None or not str(amount_str).strip():
        raise InvalidAmountError("Amount is required")

    value = _to_decimal(str(amount_str))
    if value <= 0:
        raise InvalidAmountError("Amount must be a positive number")
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def validate_balance(balance: AmountInput) -> Decimal:
    """Validate an account balance, which may be negative.

    None or a blank value is a zero balance.

    Raises:
        InvalidAmountError: If the value is not a finite number
        AmountExceedsMaximumError: If the magnitude exceeds MAX_AMOUNT
    """
    if balance is None or (isinstance(balance, str) and not balance.strip()):
        return Decimal("0.00")

    try:
        value = _to_decimal(balance, signed=True)
    except AmountExceedsMaximumError:
        raise AmountExceedsMaximumError(BALANCE_EXCEEDS_MAXIMUM) from None
    except InvalidAmountError:
        raise InvalidAmountError(INVALID_BALANCE) from None

    if value == 0:
        value = Decimal(0)
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)
