"""
Demonstration catalogue.

Maps a short name to each example's main(). Coroutine functions are wrapped
with asyncio.run so every entry is a plain zero-argument callable.
"""

import asyncio
import inspect
from dataclasses import dataclass
from typing import Callable, Dict, List

from oop_lessons.basics import application, customer, fibonacci
from oop_lessons.clean_code import orders
from oop_lessons.concurrency import fire_and_forget
from oop_lessons.encapsulation import bank_account
from oop_lessons.error_handling import account, demos, file_reader
from oop_lessons.inheritance import vehicles
from oop_lessons.pipelines import parallel, streams
from oop_lessons.solid import discounts
from oop_lessons.unit_testing import customer_service


@dataclass(frozen=True)
class Demo:
    name: str
    topic: str
    description: str
    entry_point: Callable

    def run(self) -> None:
        if inspect.iscoroutinefunction(self.entry_point):
            asyncio.run(self.entry_point())
        else:
            self.entry_point()


DEMOS: List[Demo] = [
    Demo("customer", "basics", "Render a customer value object", customer.main),
    Demo("fibonacci", "basics", "Print the first ten Fibonacci numbers", fibonacci.main),
    Demo("menu", "basics", "Run the default option of the example menu", application.main),
    Demo("vehicle", "inheritance", "A Car accelerates and brakes", vehicles.main),
    Demo("bank-account", "encapsulation", "Deposit into a private balance", bank_account.main),
    Demo("custom-exception", "error_handling", "Over-withdraw and catch InsufficientFundsError", account.main),
    Demo("division-by-zero", "error_handling", "Catch ZeroDivisionError and continue", demos.division_by_zero),
    Demo("multi-except", "error_handling", "Several handlers for one try block", demos.multi_except),
    Demo("finally", "error_handling", "A finally block after an IndexError", demos.index_with_finally),
    Demo("file-reader", "error_handling", "Read the first line of the data file", file_reader.main),
    Demo("streams", "pipelines", "Filter, map and sort in-memory lists", streams.main),
    Demo("parallel-vs-sequential", "pipelines", "Time a sequential and a parallel map", parallel.main),
    Demo("parallel-for-each", "pipelines", "Print numbers from a thread pool", parallel.main_for_each),
    Demo("fire-and-forget", "concurrency", "Start a background task without waiting", fire_and_forget.main),
    Demo("dirty-order", "clean_code", "Pay through an integer-coded conditional", orders.main_dirty),
    Demo("clean-order", "clean_code", "Pay through a PaymentMethod strategy", orders.main),
    Demo("discount", "solid", "Open/Closed discount calculation", discounts.main),
    Demo("customer-service", "unit_testing", "Look up customers through an injected repository", customer_service.main),
]

_BY_NAME: Dict[str, Demo] = {demo.name: demo for demo in DEMOS}


def get_demo(name: str) -> Demo:
    """Look up a demo by name; raises KeyError for unknown names."""
    return _BY_NAME[name]


def demo_names() -> List[str]:
    return [demo.name for demo in DEMOS]
