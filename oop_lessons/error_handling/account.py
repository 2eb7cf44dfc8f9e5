"""
Account with a withdrawal guard.

Invariant: the balance never goes negative. A withdrawal larger than the
balance raises InsufficientFundsError BEFORE anything changes, so a failed
withdrawal leaves the account exactly as it was.
"""

from decimal import Decimal

import structlog

from oop_lessons.amounts import to_amount
from oop_lessons.config import get_settings
from oop_lessons.exceptions import InsufficientFundsError, InvalidAmountError

logger = structlog.get_logger(__name__)


class Account:
    """Account with a guarded withdrawal."""

    def __init__(self, initial_balance: Decimal | int | float | str | None = None):
        if initial_balance is None:
            initial_balance = get_settings().initial_account_balance
        self._balance = to_amount(initial_balance)

    @property
    def balance(self) -> Decimal:
        return self._balance

    def withdraw(self, amount: Decimal | int | float | str) -> None:
        """
        Take amount out of the account.

        Withdrawing the whole balance is allowed; one cent more is not.

        Raises:
            InvalidAmountError: amount is zero or negative
            InsufficientFundsError: amount exceeds the current balance
        """
        value = to_amount(amount)
        if value <= 0:
            raise InvalidAmountError(value)

        if value > self._balance:
            logger.warning(
                "withdrawal_rejected",
                requested=str(value),
                balance=str(self._balance),
            )
            raise InsufficientFundsError(balance=self._balance, requested=value)

        self._balance -= value
        logger.info("withdrawal_completed", amount=str(value), balance=str(self._balance))


def main() -> None:
    account = Account()
    try:
        account.withdraw(200)
    except InsufficientFundsError as e:
        print(f"Error: {e}")
