"""
Open/Closed Principle - discount calculation.

"Software entities should be open for extension, but closed for modification."

ConditionalDiscountCalculator has to be edited for every new customer type.
DiscountCalculator never changes: a new discount is a new Discount subclass.
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from oop_lessons.amounts import to_amount

Amount = Decimal | int | float | str

VIP_RATE = Decimal("0.90")
NORMAL_RATE = Decimal("0.95")


class ConditionalDiscountCalculator:
    """The version that violates Open/Closed."""

    def calculate(self, customer_type: str, value: Amount) -> Decimal:
        amount = to_amount(value)
        if customer_type == "vip":
            return to_amount(amount * VIP_RATE)
        elif customer_type == "normal":
            return to_amount(amount * NORMAL_RATE)
        raise ValueError(f"Unknown customer type: {customer_type}")


class Discount(ABC):
    @abstractmethod
    def apply(self, value: Decimal) -> Decimal:
        """Return value after the discount."""


class VipDiscount(Discount):
    """10% off."""

    def apply(self, value: Decimal) -> Decimal:
        return to_amount(value * VIP_RATE)


class NormalDiscount(Discount):
    """5% off."""

    def apply(self, value: Decimal) -> Decimal:
        return to_amount(value * NORMAL_RATE)


class DiscountCalculator:
    def calculate(self, discount: Discount, value: Amount) -> Decimal:
        return discount.apply(to_amount(value))


def main() -> None:
    calculator = DiscountCalculator()
    discount = NormalDiscount()
    print(f"Price after discount: {calculator.calculate(discount, 300)}")
