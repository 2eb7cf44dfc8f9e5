"""
Monetary amounts.

Never use float for money: 0.1 + 0.2 != 0.3. Every amount entering an example
goes through to_amount, which converts via str (so 0.1 stays 0.1) and rounds
to cents.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from oop_lessons.exceptions import InvalidAmountError

CENTS = Decimal("0.01")


def to_amount(value: Decimal | int | float | str) -> Decimal:
    """
    Normalise a monetary value to a two-place Decimal.

    Example: to_amount(200) == Decimal("200.00"), to_amount(0.1) == Decimal("0.10")

    Raises:
        InvalidAmountError: value is not a number, or is infinite or NaN
    """
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        raise InvalidAmountError(value, reason="must be a number") from None

    if not amount.is_finite():
        raise InvalidAmountError(value, reason="must be finite")

    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)
