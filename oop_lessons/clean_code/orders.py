"""
Order processing: conditional dispatch vs payment strategies.

Before (DirtyOrder):
    if payment_type == 1: ... elif payment_type == 2: ... else: ...
    Magic numbers, and adding Pix means touching working code.

After (Order + PaymentMethod):
    order.process_order(Pix(), 200)
    Each payment method knows how to pay; Order knows nothing about them.
"""

from abc import ABC, abstractmethod
from decimal import Decimal

import structlog

from oop_lessons.amounts import to_amount

logger = structlog.get_logger(__name__)

Amount = Decimal | int | float | str


# ============================================================================
# BEFORE: conditional dispatch
# ============================================================================

class DirtyOrder:
    """Order processing driven by an integer payment code."""

    def process_order(self, payment_type: int, amount: Amount) -> str:
        value = to_amount(amount)
        if payment_type == 1:
            message = f"Cash payment of {value}"
        elif payment_type == 2:
            message = f"Card payment of {value}"
        else:
            message = "Invalid payment type"
            logger.warning("invalid_payment_type", payment_type=payment_type)

        print(message)
        return message


# ============================================================================
# AFTER: payment strategies
# ============================================================================

class PaymentMethod(ABC):
    """A way of paying. Open for extension, closed for modification."""

    name: str = ""

    @abstractmethod
    def pay(self, amount: Decimal) -> str:
        """Pay amount and return a human-readable receipt line."""


class Cash(PaymentMethod):
    name = "cash"

    def pay(self, amount: Decimal) -> str:
        return f"Cash payment of {amount}"


class Card(PaymentMethod):
    name = "card"

    def pay(self, amount: Decimal) -> str:
        return f"Card payment of {amount}"


class Pix(PaymentMethod):
    name = "pix"

    def pay(self, amount: Decimal) -> str:
        return f"Pix payment of {amount}"


class Order:
    """Processes a payment with whichever method the caller picks."""

    def process_order(self, method: PaymentMethod, amount: Amount) -> str:
        value = to_amount(amount)
        message = method.pay(value)
        logger.info("payment_processed", method=method.name, amount=str(value))

        print(message)
        return message


def main() -> None:
    payment_method = Cash()
    order = Order()
    order.process_order(payment_method, 200)


def main_dirty() -> None:
    order = DirtyOrder()
    order.process_order(1, 200)
