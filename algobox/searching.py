"""Searches over sequences and a max-heap property check."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import islice
from math import isqrt
from typing import Any


def binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in ascending ``values``, or None if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return None


def linear_search(values: Sequence[Any], target: Any, start: int = 0) -> int | None:
    """Return the first index at or after ``start`` holding ``target``, or None."""
    if start < 0:
        raise ValueError("start must not be negative")
    for index, value in enumerate(islice(values, start, None), start):
        if value == target:
            return index
    return None


def jump_search(values: Sequence[Any], target: Any, jump: int | None = None) -> int | None:
    """Find ``target`` in ascending ``values`` by jumping ahead, then scanning one block.

    The jump defaults to the square root of the length.
    """
    n = len(values)
    if jump is None:
        jump = max(1, isqrt(n))
    if jump < 1:
        raise ValueError("jump must be at least 1")
    low = 0
    while low < n and values[low] < target:
        low += jump
    if low < n and values[low] == target:
        return low
    return linear_search(values, target, max(low - jump, 0))


def is_max_heap(values: Sequence[Any]) -> bool:
    """Tell whether ``values`` laid out as a binary heap satisfies the max-heap order."""
    return all(values[(child - 1) // 2] >= values[child] for child in range(1, len(values)))