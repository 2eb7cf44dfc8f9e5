"""
Built-in exception demos.

Each function provokes one failure Python already knows about, catches it
and keeps going. Nothing is re-raised: the point is what the program prints.
"""

from oop_lessons.error_handling import account


def division_by_zero() -> None:
    try:
        result = 10 / 0
        print(f"Result: {result}")
    except ZeroDivisionError:
        print("Error: division by zero!")
    print("Program continues...")


def multi_except() -> None:
    """One try, several handlers: only the matching one runs."""
    try:
        text = None
        print(text.upper())
    except ZeroDivisionError:
        print("Calculation error.")
    except AttributeError:
        print("Variable must not be None.")


def index_with_finally() -> None:
    try:
        numbers = [1, 2, 3]
        print(numbers[5])
    except IndexError:
        print("Index out of bounds!")
    finally:
        print("The finally block always runs.")


def custom_exception() -> None:
    account.main()


def main() -> None:
    division_by_zero()
    multi_except()
    index_with_finally()
    custom_exception()
