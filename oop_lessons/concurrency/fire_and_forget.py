"""
Fire-and-forget background tasks.

The caller schedules a coroutine and moves on: no await, no result, no
cancellation. The event loop only keeps weak references to tasks, so a
strong reference is held here until the task finishes, otherwise it could be
garbage-collected mid-flight.
"""

import asyncio
from typing import Any, Coroutine, Set

import structlog

logger = structlog.get_logger(__name__)

_background_tasks: Set[asyncio.Task] = set()


def fire_and_forget(coro: Coroutine[Any, Any, Any]) -> asyncio.Task:
    """Schedule coro on the running loop and return without waiting."""
    task = asyncio.create_task(coro)
    _background_tasks.add(task)
    task.add_done_callback(_background_tasks.discard)
    logger.debug("background_task_scheduled", task=task.get_name())
    return task


def pending_tasks() -> int:
    return len(_background_tasks)


async def print_message(message: str) -> None:
    print(message)


async def main() -> None:
    fire_and_forget(print_message("Asynchronous task"))
    print("Main continues...")

    # Yield once so the background task gets a turn before the loop shuts down
    await asyncio.sleep(0)
