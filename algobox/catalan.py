"""Binomial coefficients and Catalan numbers."""

from __future__ import annotations


def binomial(n: int, r: int) -> int:
    """The number of ways to choose ``r`` items from ``n``; zero when ``r > n``."""
    if n < 0 or r < 0:
        raise ValueError("n and r must not be negative")
    result = 1
    for i in range(1, r + 1):
        result = result * (n + 1 - i) // i
    return result


def catalan(n: int) -> int:
    """The ``n``-th Catalan number, from the central binomial coefficient."""
    if n < 0:
        raise ValueError("n must not be negative")
    return binomial(2 * n, n) // (n + 1)


def catalan_numbers(n: int) -> list[int]:
    """Catalan numbers C(0) through C(n), built by the convolution recurrence."""
    if n < 0:
        raise ValueError("n must not be negative")
    numbers = [1]
    for i in range(1, n + 1):
        numbers.append(sum(a * b for a, b in zip(numbers, reversed(numbers))))
    return numbers