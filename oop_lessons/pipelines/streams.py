"""
Stream pipelines.

Each function is one filter → transform → collect sequence. The input list is
never modified; every pipeline returns a new list.
"""

from typing import Iterable, List

NUMBERS = list(range(1, 11))
NAMES = ["André", "Lucas", "Maria", "Ana", "Leonardo"]
NAMES_WITH_DUPLICATES = ["André", "Lucas", "Maria", "André"]
PIPELINE_NAMES = ["André", "Lucas", "Ana", "Leonardo", "Amanda"]


def even_numbers(numbers: Iterable[int]) -> List[int]:
    return [n for n in numbers if n % 2 == 0]


def names_starting_with(names: Iterable[str], prefix: str = "A") -> List[str]:
    return [name for name in names if name.startswith(prefix)]


def long_names_upper_sorted(names: Iterable[str], min_length: int = 3) -> List[str]:
    """
    Keep names longer than min_length, upper-case them, sort.

    Sorting is by code point, so accented letters sort after plain ones:
    "AMANDA" < "ANDRÉ" because "M" < "N".
    """
    return sorted(name.upper() for name in names if len(name) > min_length)


def list_names(names: Iterable[str]) -> List[str]:
    """Lists keep insertion order and allow repeats."""
    return list(names)


def main() -> None:
    for name in list_names(NAMES_WITH_DUPLICATES):
        print(name)
    print(f"Even numbers: {even_numbers(NUMBERS)}")
    print(f"Names starting with A: {names_starting_with(NAMES)}")
    print(f"Result: {long_names_upper_sorted(PIPELINE_NAMES)}")
