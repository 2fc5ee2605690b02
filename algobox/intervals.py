"""Interval dynamic programmes: matrix chains, palindrome cuts, balloon bursting, stick cutting, egg drops."""

from __future__ import annotations

from collections.abc import Sequence


def matrix_chain_order(dims: Sequence[int]) -> int:
    """Fewest scalar multiplications needed to multiply a chain of matrices.

    Matrix ``i`` has shape ``dims[i] x dims[i + 1]``, so ``n`` dimensions describe
    ``n - 1`` matrices.
    """
    sizes = list(dims)
    if len(sizes) < 2:
        raise ValueError("dims must describe at least one matrix")
    if any(size <= 0 for size in sizes):
        raise ValueError("dims must be positive")
    count = len(sizes) - 1
    cost = [[0] * count for _ in range(count)]
    for gap in range(1, count):
        for left in range(count - gap):
            right = left + gap
            cost[left][right] = min(
                cost[left][k] + cost[k + 1][right] + sizes[left] * sizes[k + 1] * sizes[right + 1]
                for k in range(left, right)
            )
    return cost[0][count - 1]


def _palindrome_table(text: str) -> list[list[bool]]:
    n = len(text)
    table = [[False] * n for _ in range(n)]
    for gap in range(n):
        for left in range(n - gap):
            right = left + gap
            table[left][right] = text[left] == text[right] and (
                gap < 2 or table[left + 1][right - 1]
            )
    return table


def palindrome_partition_cuts(text: str) -> int:
    """Fewest cuts splitting ``text`` into pieces that are all palindromes."""
    if not text:
        return 0
    is_palindrome = _palindrome_table(text)
    cuts: list[int] = []
    for right in range(len(text)):
        if is_palindrome[0][right]:
            cuts.append(0)
        else:
            cuts.append(
                1
                + min(
                    cuts[left - 1]
                    for left in range(1, right + 1)
                    if is_palindrome[left][right]
                )
            )
    return cuts[-1]


def max_coins(nums: Sequence[int]) -> int:
    """Most coins from bursting every balloon; a burst pays the product with its live neighbours."""
    balloons = [1, *nums, 1]
    n = len(balloons) - 2
    best = [[0] * (n + 2) for _ in range(n + 2)]
    for gap in range(n):
        for left in range(1, n - gap + 1):
            right = left + gap
            outside = balloons[left - 1] * balloons[right + 1]
            best[left][right] = max(
                best[left][last - 1] + outside * balloons[last] + best[last + 1][right]
                for last in range(left, right + 1)
            )
    return best[1][n]


def min_cost_to_cut_stick(length: int, cuts: Sequence[int]) -> int:
    """Cheapest total cost of making every cut, where a cut costs the length of the piece it splits."""
    if length < 0:
        raise ValueError("length must not be negative")
    positions = sorted(cuts)
    if any(not 0 < position < length for position in positions):
        raise ValueError("cuts must lie strictly inside the stick")
    points = [0, *positions, length]
    n = len(points)
    cost = [[0] * n for _ in range(n)]
    for gap in range(2, n):
        for left in range(n - gap):
            right = left + gap
            cost[left][right] = min(
                cost[left][k] + cost[k][right] for k in range(left + 1, right)
            ) + points[right] - points[left]
    return cost[0][n - 1]


def super_egg_drop(eggs: int, floors: int) -> int:
    """Fewest drops that always find the critical floor among ``floors`` with ``eggs`` eggs."""
    if eggs < 1:
        raise ValueError("eggs must be at least 1")
    if floors < 0:
        raise ValueError("floors must not be negative")
    # reach[e]: floors that can be settled with e eggs in the drops made so far
    reach = [0] * (eggs + 1)
    drops = 0
    while reach[eggs] < floors:
        drops += 1
        for e in range(eggs, 0, -1):
            reach[e] += reach[e - 1] + 1
    return drops