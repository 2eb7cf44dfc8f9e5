"""
Application menu - pick one example by number.

Option map:
1 → customer rendering
2 → Fibonacci sequence
3 → vehicle behaviour (default)
"""

from typing import Callable, Dict

import structlog

from oop_lessons.basics import customer, fibonacci
from oop_lessons.inheritance import vehicles

logger = structlog.get_logger(__name__)

OPTIONS: Dict[int, Callable[[], None]] = {
    1: customer.main,
    2: fibonacci.main,
    3: vehicles.main,
}

DEFAULT_OPTION = 3


def run_option(option: int) -> None:
    """Run the example registered under option."""
    example = OPTIONS.get(option)
    if example is None:
        raise ValueError(f"Unknown option {option}, choose one of {sorted(OPTIONS)}")

    logger.debug("option_selected", option=option)
    example()


def main(option: int = DEFAULT_OPTION) -> None:
    run_option(option)
