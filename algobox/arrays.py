"""Maximum subarray sums and next-greater-element lookups."""

from __future__ import annotations

from collections.abc import Sequence


def max_subarray_sum(values: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run, by Kadane's scan."""
    if not values:
        raise ValueError("values must not be empty")
    best = values[0]
    running = 0
    for value in values:
        running += value
        best = max(best, running)
        if running < 0:
            running = 0
    return best


def _crossing_sum(values: Sequence[int], low: int, mid: int, high: int) -> int:
    total = 0
    left_best = None
    for i in range(mid, low - 1, -1):
        total += values[i]
        if left_best is None or total > left_best:
            left_best = total
    total = 0
    right_best = None
    for i in range(mid, high + 1):
        total += values[i]
        if right_best is None or total > right_best:
            right_best = total
    return max(left_best + right_best - values[mid], left_best, right_best)


def _divide(values: Sequence[int], low: int, high: int) -> int | None:
    if low > high:
        return None
    if low == high:
        return values[low]
    mid = (low + high) // 2
    candidates = (
        _divide(values, low, mid - 1),
        _divide(values, mid + 1, high),
        _crossing_sum(values, low, mid, high),
    )
    return max(c for c in candidates if c is not None)


def max_subarray_sum_divide(values: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run, by divide and conquer."""
    if not values:
        raise ValueError("values must not be empty")
    result = _divide(values, 0, len(values) - 1)
    assert result is not None
    return result


def next_greater_elements(values: Sequence[int]) -> list[int]:
    """For each element, the first later element that is strictly greater, else -1."""
    result = [-1] * len(values)
    waiting: list[int] = []
    for index, value in enumerate(values):
        while waiting and values[waiting[-1]] < value:
            result[waiting.pop()] = value
        waiting.append(index)
    return result