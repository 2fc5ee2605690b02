"""Fibonacci numbers, string permutations, the Tower of Hanoi and N queens."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def fibonacci(n: int) -> int:
    """The ``n``-th Fibonacci number, counting F(0) = 0 and F(1) = 1."""
    if n < 0:
        raise ValueError("n must not be negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def fibonacci_series(n: int) -> list[int]:
    """The first ``n`` Fibonacci numbers."""
    if n < 0:
        raise ValueError("n must not be negative")
    series: list[int] = []
    current, following = 0, 1
    for _ in range(n):
        series.append(current)
        current, following = following, current + following
    return series


def permutations(text: str) -> Iterator[str]:
    """Yield every arrangement of ``text`` in swap order; repeats are not removed."""
    chars = list(text)

    def permute(left: int) -> Iterator[str]:
        if left == len(chars) - 1:
            yield "".join(chars)
            return
        for i in range(left, len(chars)):
            chars[left], chars[i] = chars[i], chars[left]
            yield from permute(left + 1)
            chars[left], chars[i] = chars[i], chars[left]

    if chars:
        yield from permute(0)


def tower_of_hanoi(
    n: int, source: str = "A", target: str = "C", auxiliary: str = "B"
) -> Iterator[tuple[int, str, str]]:
    """Yield the moves ``(disk, from_rod, to_rod)`` that carry ``n`` disks to ``target``."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return
    yield from tower_of_hanoi(n - 1, source, auxiliary, target)
    yield (n, source, target)
    yield from tower_of_hanoi(n - 1, auxiliary, target, source)


def solve_n_queens(n: int) -> list[list[int]] | None:
    """Place ``n`` non-attacking queens column by column.

    Returns a board of 0s and 1s, or None when no placement exists.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    board = [[0] * n for _ in range(n)]
    rows: set[int] = set()
    falling: set[int] = set()
    rising: set[int] = set()

    def place(col: int) -> bool:
        if col >= n:
            return True
        for row in range(n):
            if row in rows or row - col in falling or row + col in rising:
                continue
            board[row][col] = 1
            rows.add(row)
            falling.add(row - col)
            rising.add(row + col)
            if place(col + 1):
                return True
            board[row][col] = 0
            rows.discard(row)
            falling.discard(row - col)
            rising.discard(row + col)
        return False

    return board if place(0) else None


def format_board(board: Sequence[Sequence[int]]) -> str:
    """Render a board with each cell padded by one space on either side."""
    return "".join("".join(f" {cell} " for cell in row) + "\n" for row in board)