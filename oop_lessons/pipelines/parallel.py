"""
Sequential vs parallel map.

Both runners double every number after a short sleep that stands in for slow
work. The thread pool overlaps the sleeps, so it wins when items are
independent and I/O-like. Results come back in input order either way:
ThreadPoolExecutor.map preserves ordering.

When NOT to go parallel:
- Tiny workloads (pool overhead beats the gain)
- Work that depends on ordering of side effects
- Shared mutable state without synchronization
"""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Iterable, List, TypeVar

import structlog

from oop_lessons.config import get_settings

logger = structlog.get_logger(__name__)

T = TypeVar("T")

_print_lock = threading.Lock()


@dataclass(frozen=True)
class TimingReport:
    """Wall-clock duration of each runner, in milliseconds."""

    sequential_ms: int
    parallel_ms: int

    @property
    def speedup(self) -> float:
        if self.parallel_ms == 0:
            return float("inf")
        return self.sequential_ms / self.parallel_ms


def process(number: int, delay: float) -> int:
    """Simulate a slow operation (delay seconds per item)."""
    time.sleep(delay)
    return number * 2


def run_sequential(numbers: Iterable[int], delay: float) -> List[int]:
    return [process(n, delay) for n in numbers]


def run_parallel(numbers: Iterable[int], delay: float, max_workers: int) -> List[int]:
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(lambda n: process(n, delay), numbers))


def parallel_for_each(items: Iterable[T], action: Callable[[T], None], max_workers: int) -> None:
    """
    Apply action to every item concurrently.

    No ordering guarantee: items may be handled in any order. Exceptions
    raised by action propagate to the caller once all submitted work is done.
    """
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(action, item) for item in items]
    for future in futures:
        future.result()


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def compare(numbers: List[int], delay: float, max_workers: int) -> TimingReport:
    """Time both runners over the same input."""
    start = time.perf_counter()
    run_sequential(numbers, delay)
    sequential_ms = _elapsed_ms(start)

    start = time.perf_counter()
    run_parallel(numbers, delay, max_workers)
    parallel_ms = _elapsed_ms(start)

    report = TimingReport(sequential_ms=sequential_ms, parallel_ms=parallel_ms)
    logger.info(
        "timing_compared",
        items=len(numbers),
        sequential_ms=sequential_ms,
        parallel_ms=parallel_ms,
        max_workers=max_workers,
    )
    return report


def main() -> None:
    settings = get_settings()
    numbers = list(range(1, settings.benchmark_size + 1))

    report = compare(numbers, settings.work_delay_seconds, settings.max_workers)
    print(f"Sequential time: {report.sequential_ms}ms")
    print(f"Parallel time: {report.parallel_ms}ms")
    print(f"Speedup: {report.speedup:.1f}x")


def _print_item(item: object) -> None:
    with _print_lock:
        print(item)


def main_for_each() -> None:
    """Print a few numbers from a thread pool; the order varies between runs."""
    parallel_for_each([1, 2, 3, 4, 5], _print_item, get_settings().max_workers)
