"""
Bank account - encapsulation.

The balance lives in a private attribute. Callers can read it through a
property and grow it through deposit(), but there is no setter: nobody can
write account.balance = 1_000_000.
"""

from decimal import Decimal

import structlog

from oop_lessons.amounts import to_amount
from oop_lessons.exceptions import InvalidAmountError

logger = structlog.get_logger(__name__)


class BankAccount:
    """Account whose balance only changes through deposit()."""

    def __init__(self) -> None:
        self._balance = to_amount(0)

    @property
    def balance(self) -> Decimal:
        return self._balance

    def deposit(self, amount: Decimal | int | float | str) -> None:
        """
        Add amount to the balance.

        Raises:
            InvalidAmountError: amount is zero or negative (balance unchanged)
        """
        value = to_amount(amount)
        if value <= 0:
            raise InvalidAmountError(value)

        self._balance += value
        logger.info("deposit_completed", amount=str(value), balance=str(self._balance))


def main() -> None:
    account = BankAccount()
    account.deposit(150)
    print(f"Balance: {account.balance}")
