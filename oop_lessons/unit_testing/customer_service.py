"""
Customer service - dependency injection for testability.

CustomerService receives its repository in the constructor instead of
creating one. Production code passes a real repository; a test passes an
in-memory one (or a mock) and checks the service logic in isolation:

    service = CustomerService(InMemoryCustomerRepository({7: CustomerRecord(7, "Ana")}))
    assert service.find_customer_name_by_id(7) == "Ana"
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

import structlog

from oop_lessons.exceptions import CustomerNotFoundError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CustomerRecord:
    id: int
    name: str


class CustomerRepository(ABC):
    """Where customers come from. The service depends only on this."""

    @abstractmethod
    def find_by_id(self, customer_id: int) -> Optional[CustomerRecord]:
        """Return the customer, or None if there is no such id."""


class InMemoryCustomerRepository(CustomerRepository):
    """Dictionary-backed repository, seeded with a single customer by default."""

    def __init__(self, records: Optional[Mapping[int, CustomerRecord]] = None):
        if records is None:
            records = {1: CustomerRecord(id=1, name="Andre")}
        self._records: Dict[int, CustomerRecord] = dict(records)

    def find_by_id(self, customer_id: int) -> Optional[CustomerRecord]:
        return self._records.get(customer_id)

    def add(self, record: CustomerRecord) -> None:
        self._records[record.id] = record


class CustomerService:
    def __init__(self, repository: CustomerRepository):
        self.repository = repository

    def find_customer_name_by_id(self, customer_id: int) -> str:
        """
        Look up a customer's name.

        Raises:
            CustomerNotFoundError: the repository has no such customer
        """
        customer = self.repository.find_by_id(customer_id)
        if customer is None:
            logger.info("customer_not_found", customer_id=customer_id)
            raise CustomerNotFoundError(customer_id)
        return customer.name


def main() -> None:
    service = CustomerService(InMemoryCustomerRepository())
    print(f"Customer 1: {service.find_customer_name_by_id(1)}")
    try:
        service.find_customer_name_by_id(2)
    except CustomerNotFoundError as e:
        print(f"Customer 2: {e}")
