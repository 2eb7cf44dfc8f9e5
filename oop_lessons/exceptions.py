"""
Exception classes for the OOP lessons.

Exception design:
1. One base class, so callers can catch every lesson error at once
2. Every exception carries a stable error code
3. Context (amounts, identifiers) travels as metadata, not inside the message

The built-in exception demos (division by zero, None access, bad index,
missing file) deliberately use Python's own exceptions instead.
"""

from decimal import Decimal
from typing import Any, Dict


class LessonError(Exception):
    """
    Base exception for all lesson errors.

    Every exception includes:
    - Error code (for programmatic handling)
    - Message (safe to print)
    - Metadata (values that explain the failure)
    """

    def __init__(self, message: str, error_code: str, **kwargs):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.metadata = kwargs

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for structured output"""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "type": self.__class__.__name__,
            }
        }


# ============================================================================
# ACCOUNT ERRORS
# ============================================================================

class InsufficientFundsError(LessonError):
    """
    Withdrawal exceeds the available balance.

    Raised before the balance is touched, so the account stays unchanged.
    """

    def __init__(self, balance: Decimal, requested: Decimal, **kwargs):
        super().__init__(
            message="Insufficient funds.",
            error_code="insufficient_funds",
            balance=balance,
            requested=requested,
            **kwargs
        )
        self.balance = balance
        self.requested = requested


class InvalidAmountError(LessonError):
    """Deposit or withdrawal amount is not a number, or is zero or negative"""

    def __init__(self, amount: Any, reason: str = "must be positive", **kwargs):
        super().__init__(
            message=f"Amount {reason}, got {amount}",
            error_code="invalid_amount",
            amount=amount,
            **kwargs
        )
        self.amount = amount


# ============================================================================
# LOOKUP ERRORS
# ============================================================================

class CustomerNotFoundError(LessonError):
    """Repository has no customer with the requested identifier"""

    def __init__(self, customer_id: int, **kwargs):
        super().__init__(
            message="Customer not found.",
            error_code="customer_not_found",
            customer_id=customer_id,
            **kwargs
        )
        self.customer_id = customer_id
