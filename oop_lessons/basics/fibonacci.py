"""Fibonacci numbers, computed iteratively."""


def fibonacci(n: int) -> int:
    """
    Return the n-th Fibonacci number.

    fibonacci(0) == 0, fibonacci(1) == fibonacci(2) == 1, fibonacci(10) == 55.
    Runs in linear time; the naive recursive version is exponential.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")

    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous


def fibonacci_sequence(n: int) -> list[int]:
    """Fibonacci numbers for positions 1..n."""
    return [fibonacci(i) for i in range(1, n + 1)]


def main(n: int = 10) -> None:
    for value in fibonacci_sequence(n):
        print(value)
