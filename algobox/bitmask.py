"""Dynamic programmes over subsets encoded as bit masks."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import cache
from itertools import combinations
from math import gcd


def _square(name: str, matrix: Iterable[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError(f"{name} must be a square matrix")
    return rows


def _rectangle(name: str, matrix: Iterable[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    if not rows or not rows[0]:
        raise ValueError(f"{name} must not be empty")
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError(f"{name} rows must all have the same length")
    return rows


def can_partition_k_subsets(nums: Sequence[int], k: int) -> bool:
    """Whether ``nums`` splits into ``k`` groups that all have the same sum."""
    if k < 1:
        raise ValueError("k must be at least 1")
    values = sorted(nums, reverse=True)
    if not values:
        raise ValueError("nums must not be empty")
    if values[-1] <= 0:
        raise ValueError("nums must be positive")
    total = sum(values)
    if total % k:
        return False
    side = total // k
    if values[0] > side:
        return False
    full = (1 << len(values)) - 1

    @cache
    def feasible(mask: int, filled: int) -> bool:
        if mask == full:
            return True
        for i, value in enumerate(values):
            bit = 1 << i
            if mask & bit or filled + value > side:
                continue
            if feasible(mask | bit, (filled + value) % side):
                return True
        return False

    return feasible(0, 0)


def makesquare(sticks: Sequence[int]) -> bool:
    """Whether all the sticks together form the four equal sides of a square."""
    if not sticks:
        return False
    return can_partition_k_subsets(sticks, 4)


def max_score(nums: Sequence[int]) -> int:
    """Best total when pairing all numbers; the i-th pairing scores ``i * gcd(x, y)``."""
    values = list(nums)
    if len(values) % 2:
        raise ValueError("nums must hold an even number of values")
    count = len(values)

    @cache
    def best(mask: int) -> int:
        free = [i for i in range(count) if not mask >> i & 1]
        if not free:
            return 0
        operation = (count - len(free)) // 2 + 1
        return max(
            operation * gcd(values[i], values[j]) + best(mask | 1 << i | 1 << j)
            for i, j in combinations(free, 2)
        )

    return best(0)


def min_assignment_cost(cost: Iterable[Sequence[int]]) -> int:
    """Cheapest way to give each worker (row) a distinct job (column)."""
    rows = _square("cost", cost)
    n = len(rows)

    @cache
    def best(worker: int, mask: int) -> int:
        if worker == n:
            return 0
        return min(
            rows[worker][job] + best(worker + 1, mask | 1 << job)
            for job in range(n)
            if not mask >> job & 1
        )

    return best(0, 0)


def connect_two_groups(cost: Iterable[Sequence[int]]) -> int:
    """Cheapest set of edges touching every point of both groups.

    ``cost[i][j]`` is the price of joining point ``i`` of the first group to
    point ``j`` of the second.
    """
    rows = _rectangle("cost", cost)
    first, second = len(rows), len(rows[0])
    cheapest = [min(column) for column in zip(*rows)]

    @cache
    def best(i: int, mask: int) -> int:
        if i == first:
            return sum(cheapest[j] for j in range(second) if not mask >> j & 1)
        return min(rows[i][j] + best(i + 1, mask | 1 << j) for j in range(second))

    return best(0, 0)


def minimum_xor_sum(nums1: Sequence[int], nums2: Sequence[int]) -> int:
    """Smallest sum of ``nums1[i] ^ nums2[p(i)]`` over all rearrangements ``p`` of ``nums2``."""
    if len(nums1) != len(nums2):
        raise ValueError("nums1 and nums2 must have the same length")
    return min_assignment_cost([[a ^ b for b in nums2] for a in nums1])


def travelling_salesman(distance: Iterable[Sequence[int]]) -> int:
    """Shortest round trip from city 0 through every other city once and back."""
    rows = _square("distance", distance)
    if not rows:
        raise ValueError("distance must not be empty")
    n = len(rows)
    full = (1 << n) - 1

    @cache
    def tour(city: int, mask: int) -> int:
        if mask == full:
            return rows[city][0]
        return min(
            rows[city][nxt] + tour(nxt, mask | 1 << nxt)
            for nxt in range(n)
            if not mask >> nxt & 1
        )

    return tour(0, 1)


def count_shirt_assignments(collections: Iterable[Iterable[object]]) -> int:
    """Ways to give every person one shirt from their own collection, no shirt given twice."""
    people = [frozenset(collection) for collection in collections]
    shirts = list(dict.fromkeys(shirt for person in people for shirt in person))
    owners = [
        tuple(i for i, person in enumerate(people) if shirt in person) for shirt in shirts
    ]
    full = (1 << len(people)) - 1

    @cache
    def ways(index: int, mask: int) -> int:
        if mask == full:
            return 1
        if index == len(shirts):
            return 0
        total = ways(index + 1, mask)
        for person in owners[index]:
            if not mask >> person & 1:
                total += ways(index + 1, mask | 1 << person)
        return total

    return ways(0, 0)