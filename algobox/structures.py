"""A directed graph with depth-first traversal, a stack, a min segment tree and postfix evaluation."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Hashable, Iterable, Sequence
from typing import Any


class Graph:
    """Directed graph stored as adjacency lists."""

    def __init__(self) -> None:
        self._adjacency: defaultdict[Hashable, list[Hashable]] = defaultdict(list)

    def add_edge(self, v: Hashable, w: Hashable) -> None:
        """Add an edge from ``v`` to ``w``."""
        self._adjacency[v].append(w)

    def dfs(self, start: Hashable) -> list[Hashable]:
        """Vertices reachable from ``start`` in depth-first order, neighbours in insertion order."""
        visited = {start}
        order = [start]
        pending = [iter(self._adjacency.get(start, ()))]
        while pending:
            for neighbour in pending[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    pending.append(iter(self._adjacency.get(neighbour, ())))
                    break
            else:
                pending.pop()
        return order


class Stack:
    """Last-in, first-out stack."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items = list(items)

    def push(self, value: Any) -> None:
        self._items.append(value)

    def pop(self) -> Any:
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class SegmentTree:
    """Range-minimum segment tree with point updates."""

    def __init__(self, values: Sequence[int]) -> None:
        self._size = len(values)
        self._tree = [0] * (4 * self._size + 1)
        if self._size:
            self._build(0, 0, self._size - 1, values)

    def __len__(self) -> int:
        return self._size

    def _build(self, node: int, low: int, high: int, values: Sequence[int]) -> None:
        if low == high:
            self._tree[node] = values[low]
            return
        mid = low + (high - low) // 2
        self._build(2 * node + 1, low, mid, values)
        self._build(2 * node + 2, mid + 1, high, values)
        self._tree[node] = min(self._tree[2 * node + 1], self._tree[2 * node + 2])

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError("segment tree index out of range")

    def query(self, left: int, right: int) -> int:
        """Minimum of the values at positions ``left`` through ``right`` inclusive."""
        self._check_index(left)
        self._check_index(right)
        if left > right:
            raise ValueError("left must not exceed right")
        return self._query(0, 0, self._size - 1, left, right)

    def _query(self, node: int, low: int, high: int, left: int, right: int) -> int | float:
        if high < left or right < low:
            return float("inf")
        if left <= low and high <= right:
            return self._tree[node]
        mid = low + (high - low) // 2
        return min(
            self._query(2 * node + 1, low, mid, left, right),
            self._query(2 * node + 2, mid + 1, high, left, right),
        )

    def update(self, index: int, value: int) -> None:
        """Set the value at ``index``."""
        self._check_index(index)
        self._update(0, 0, self._size - 1, index, value)

    def _update(self, node: int, low: int, high: int, index: int, value: int) -> None:
        if low == high:
            self._tree[node] = value
            return
        mid = low + (high - low) // 2
        if index <= mid:
            self._update(2 * node + 1, low, mid, index, value)
        else:
            self._update(2 * node + 2, mid + 1, high, index, value)
        self._tree[node] = min(self._tree[2 * node + 1], self._tree[2 * node + 2])


def _truncating_divide(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATORS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _truncating_divide,
}


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands and ``+ - * /``.

    Division truncates toward zero.
    """
    stack = Stack()
    for char in expression:
        if char.isdigit():
            stack.push(int(char))
            continue
        operation = _OPERATORS.get(char)
        if operation is None:
            raise ValueError(f"unexpected character {char!r}")
        if len(stack) < 2:
            raise ValueError(f"operator {char!r} needs two operands")
        right = stack.pop()
        left = stack.pop()
        stack.push(operation(left, right))
    if len(stack) != 1:
        raise ValueError("expression does not reduce to a single value")
    return stack.pop()