"""Algorithms over two-dimensional lists."""

from __future__ import annotations

from collections.abc import Sequence


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Values read clockwise from the outside in, starting at the top left."""
    if not matrix:
        return []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    result: list[int] = []
    while top <= bottom and left <= right:
        result.extend(matrix[top][left:right + 1])
        top += 1
        result.extend(row[right] for row in matrix[top:bottom + 1])
        right -= 1
        if top <= bottom:
            result.extend(reversed(matrix[bottom][left:right + 1]))
            bottom -= 1
        if left <= right:
            result.extend(matrix[i][left] for i in range(bottom, top - 1, -1))
            left += 1
    return result


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    rows = {i for i, row in enumerate(matrix) if 0 in row}
    cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        if i in rows:
            row[:] = [0] * len(row)
        else:
            for j in cols:
                row[j] = 0


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """The first ``num_rows`` rows of Pascal's triangle."""
    triangle = []
    for row in range(num_rows):
        values = []
        entry = 1
        for col in range(row + 1):
            values.append(entry)
            entry = entry * (row - col) // (col + 1)
        triangle.append(values)
    return triangle