"""
Customer - the first class.

A class bundles data (id, name, email) with behaviour (how to render itself).
Two customers with the same values are equal: this is a value object.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Customer(BaseModel):
    """
    Customer value object.

    Every field is optional so an empty Customer() can be built first and
    populated later by model_copy(update=...).
    """

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    name: str | None = None
    email: str | None = None

    def __init__(self, id: int | None = None, name: str | None = None, email: str | None = None, **data):
        # Positional arguments read like the classic constructor: Customer(1, "Andre", "...")
        super().__init__(id=id, name=name, email=email, **data)

    def __str__(self) -> str:
        return f"id: {self.id}, Name: {self.name}, Email: {self.email}"


def main() -> None:
    customer = Customer(1, "Andre", "andreleaos@gmail.com")
    print(str(customer))
