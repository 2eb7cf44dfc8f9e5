"""
Pytest configuration and fixtures for the OOP lesson tests.
"""

from decimal import Decimal

import pytest
from structlog.testing import capture_logs

from oop_lessons.config import get_settings
from oop_lessons.error_handling.account import Account
from oop_lessons.unit_testing.customer_service import (
    CustomerRecord,
    CustomerService,
    InMemoryCustomerRepository,
)


@pytest.fixture(autouse=True)
def captured_logs():
    """Capture structlog events instead of printing them next to demo output."""
    with capture_logs() as logs:
        yield logs


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read settings for every test so monkeypatched env vars apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def account():
    """Account with the default balance of 100."""
    return Account(initial_balance=Decimal("100"))


@pytest.fixture
def customer_repository():
    """Repository holding two known customers."""
    return InMemoryCustomerRepository(
        {
            1: CustomerRecord(id=1, name="Andre"),
            7: CustomerRecord(id=7, name="Ana"),
        }
    )


@pytest.fixture
def customer_service(customer_repository):
    """Service wired to the in-memory repository."""
    return CustomerService(customer_repository)
