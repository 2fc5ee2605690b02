"""Element-wise and product operations on matrices held as lists of rows."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = list[list[int]]


def _shape(matrix: Sequence[Sequence[int]]) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return rows, cols


def _check_same_shape(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> None:
    if _shape(a) != _shape(b):
        raise ValueError("matrices must have the same shape")


def add_matrices(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Element-wise sum of two matrices of equal shape."""
    _check_same_shape(a, b)
    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def subtract_matrices(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Element-wise difference ``a - b`` of two matrices of equal shape."""
    _check_same_shape(a, b)
    return [[x - y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def multiply_matrices(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Matrix product; the columns of ``a`` must match the rows of ``b``."""
    _, cols_a = _shape(a)
    rows_b, _ = _shape(b)
    if cols_a != rows_b:
        raise ValueError("The matrices cannot be multiplied")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]


def transpose(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Rows become columns."""
    _shape(matrix)
    return [list(column) for column in zip(*matrix)]


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render one line per row, each element followed by a space."""
    return "".join("".join(f"{element} " for element in row) + "\n" for row in matrix)