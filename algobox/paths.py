"""Dynamic programmes that optimise a path or a sequence of steps toward a target."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate
from typing import Any


def _rows(name: str, grid: Iterable[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError(f"{name} must not be empty")
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError(f"{name} rows must all have the same length")
    return rows


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Cheapest climb past the last stair, starting on stair 0 or 1 and stepping one or two."""
    two_back, one_back = 0, 0
    for i in range(2, len(cost) + 1):
        two_back, one_back = one_back, min(one_back + cost[i - 1], two_back + cost[i - 2])
    return one_back


def find_max_form(strs: Iterable[str], zeros: int, ones: int) -> int:
    """Largest number of strings that together use at most ``zeros`` '0's and ``ones`` other characters."""
    if zeros < 0 or ones < 0:
        raise ValueError("budgets must not be negative")
    best = [[0] * (ones + 1) for _ in range(zeros + 1)]
    for text in strs:
        need_zeros = text.count("0")
        need_ones = len(text) - need_zeros
        for i in range(zeros, need_zeros - 1, -1):
            row, source = best[i], best[i - need_zeros]
            for j in range(ones, need_ones - 1, -1):
                row[j] = max(row[j], source[j - need_ones] + 1)
    return best[zeros][ones]


def _filled(cell: Any) -> bool:
    return cell == "1" or cell == 1


def maximal_square(matrix: Iterable[Sequence[Any]]) -> int:
    """Area of the largest all-'1' square in a grid of '0' and '1' cells."""
    side = 0
    previous: list[int] = []
    for row in matrix:
        current = [0] * (len(row) + 1)
        if len(previous) != len(current):
            previous = [0] * len(current)
        for j, cell in enumerate(row, 1):
            if _filled(cell):
                current[j] = 1 + min(previous[j], current[j - 1], previous[j - 1])
                side = max(side, current[j])
        previous = current
    return side * side


def min_path_sum(grid: Iterable[Sequence[int]]) -> int:
    """Smallest sum along a path from top-left to bottom-right moving only right or down."""
    rows = _rows("grid", grid)
    previous = list(accumulate(rows[0]))
    for row in rows[1:]:
        current: list[int] = []
        for j, value in enumerate(row):
            came_from = previous[j] if j == 0 else min(previous[j], current[j - 1])
            current.append(came_from + value)
        previous = current
    return previous[-1]


def min_falling_path_sum(matrix: Iterable[Sequence[int]]) -> int:
    """Smallest sum falling one row at a time, each step to the same or an adjacent column."""
    rows = _rows("matrix", matrix)
    previous = rows[0]
    for row in rows[1:]:
        previous = [
            value + min(previous[max(0, j - 1) : j + 2]) for j, value in enumerate(row)
        ]
    return min(previous)


def mincost_tickets(days: Iterable[int], costs: Sequence[int]) -> int:
    """Cheapest mix of 1-, 7- and 30-day passes covering every travel day."""
    day_cost, week_cost, month_cost = costs
    travel = set(days)
    if not travel:
        return 0
    if min(travel) < 1:
        raise ValueError("days must be positive")
    last = max(travel)
    spent = [0] * (last + 1)
    for day in range(1, last + 1):
        if day not in travel:
            spent[day] = spent[day - 1]
        else:
            spent[day] = min(
                spent[day - 1] + day_cost,
                spent[max(0, day - 7)] + week_cost,
                spent[max(0, day - 30)] + month_cost,
            )
    return spent[last]


def min_steps(n: int) -> int:
    """Fewest copy-all and paste operations to turn one character into ``n``."""
    if n < 1:
        raise ValueError("n must be at least 1")
    steps = [0] * (n + 1)
    for i in range(2, n + 1):
        factor = next(j for j in range(i // 2, 0, -1) if i % j == 0)
        steps[i] = steps[factor] + i // factor
    return steps[n]


def num_squares(n: int) -> int:
    """Fewest perfect squares summing to ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    best = [0] * (n + 1)
    for i in range(1, n + 1):
        best[i] = 1 + min(best[i - j * j] for j in range(1, int(i**0.5) + 2) if j * j <= i)
    return best[n]


def minimum_total(triangle: Iterable[Sequence[int]]) -> int:
    """Smallest top-to-bottom path sum through a triangle, stepping to an adjacent index below."""
    rows = [list(row) for row in triangle]
    if not rows:
        raise ValueError("triangle must not be empty")
    if any(len(row) != i + 1 for i, row in enumerate(rows)):
        raise ValueError("row i of the triangle must hold i + 1 values")
    previous = rows[0]
    for i, row in enumerate(rows[1:], 1):
        previous = [
            value + min(previous[max(0, j - 1)], previous[min(i - 1, j)])
            for j, value in enumerate(row)
        ]
    return min(previous)