"""Breadth- and depth-first searches over rectangular grids."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any

Cell = tuple[int, int]

_ORTHOGONAL = ((-1, 0), (0, 1), (1, 0), (0, -1))
_ALL_AROUND = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


def _dimensions(grid: Sequence[Sequence[Any]]) -> tuple[int, int]:
    if not grid:
        raise ValueError("grid must not be empty")
    return len(grid), len(grid[0])


def _neighbours(
    cell: Cell, rows: int, cols: int, steps: Iterable[Cell] = _ORTHOGONAL
) -> Iterator[Cell]:
    row, col = cell
    for dr, dc in steps:
        r, c = row + dr, col + dc
        if 0 <= r < rows and 0 <= c < cols:
            yield r, c


def _cells(grid: Sequence[Sequence[Any]]) -> Iterator[tuple[Cell, Any]]:
    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            yield (r, c), value


def _border(rows: int, cols: int) -> Iterator[Cell]:
    for c in range(cols):
        yield 0, c
        yield rows - 1, c
    for r in range(rows):
        yield r, 0
        yield r, cols - 1


def _reach(
    grid: Sequence[Sequence[Any]],
    starts: Iterable[Cell],
    is_open: Callable[[Any], bool],
) -> set[Cell]:
    """Cells connected orthogonally to ``starts`` through open cells."""
    rows, cols = _dimensions(grid)
    seen: set[Cell] = set()
    pending: list[Cell] = []
    for cell in starts:
        if cell not in seen and is_open(grid[cell[0]][cell[1]]):
            seen.add(cell)
            pending.append(cell)
    while pending:
        cell = pending.pop()
        for r, c in _neighbours(cell, rows, cols):
            if (r, c) not in seen and is_open(grid[r][c]):
                seen.add((r, c))
                pending.append((r, c))
    return seen


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Minutes until every fresh orange (1) has rotted from the rotten ones (2).

    Returns -1 when some fresh orange can never be reached.
    """
    rows, cols = _dimensions(grid)
    rotten = [cell for cell, value in _cells(grid) if value == 2]
    seen = set(rotten)
    queue = deque((cell, 0) for cell in rotten)
    minutes = 0
    while queue:
        cell, elapsed = queue.popleft()
        minutes = max(minutes, elapsed)
        for r, c in _neighbours(cell, rows, cols):
            if (r, c) not in seen and grid[r][c] == 1:
                seen.add((r, c))
                queue.append(((r, c), elapsed + 1))
    if any(value == 1 and cell not in seen for cell, value in _cells(grid)):
        return -1
    return minutes


def num_enclaves(grid: Sequence[Sequence[int]]) -> int:
    """Number of land cells (1) from which the border cannot be reached."""
    rows, cols = _dimensions(grid)
    escaped = _reach(grid, _border(rows, cols), lambda value: value == 1)
    return sum(1 for cell, value in _cells(grid) if value == 1 and cell not in escaped)


def shortest_path_binary_matrix(grid: Sequence[Sequence[int]]) -> int:
    """Cells on the shortest 8-connected path of zeros across a square grid; -1 if none."""
    n = len(grid)
    if n == 0:
        raise ValueError("grid must not be empty")
    if grid[0][0] == 1 or grid[n - 1][n - 1] == 1:
        return -1
    if n == 1:
        return 1
    goal = (n - 1, n - 1)
    seen = {(0, 0)} | {cell for cell, value in _cells(grid) if value != 0}
    queue = deque([((0, 0), 1)])
    while queue:
        cell, length = queue.popleft()
        for nxt in _neighbours(cell, n, n, _ALL_AROUND):
            if nxt in seen:
                continue
            if nxt == goal:
                return length + 1
            seen.add(nxt)
            queue.append((nxt, length + 1))
    return -1


def solve_surrounded(board: list[list[str]]) -> None:
    """Flip, in place, every 'O' region not touching the border to 'X'."""
    rows, cols = _dimensions(board)
    safe = _reach(board, _border(rows, cols), lambda value: value == "O")
    for (r, c), value in _cells(board):
        if value == "O" and (r, c) not in safe:
            board[r][c] = "X"


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Number of orthogonally connected groups of '1' cells."""
    _dimensions(grid)
    seen: set[Cell] = set()
    count = 0
    for cell, value in _cells(grid):
        if value == "1" and cell not in seen:
            count += 1
            seen |= _reach(grid, [cell], lambda v: v == "1")
    return count


def update_matrix(mat: Sequence[Sequence[int]]) -> list[list[int]]:
    """Distance from every 1 cell to the nearest 0 cell, in orthogonal steps."""
    rows, cols = _dimensions(mat)
    distances = [[0] * cols for _ in range(rows)]
    queue = deque((cell, 0) for cell, value in _cells(mat) if value == 0)
    while queue:
        cell, dist = queue.popleft()
        for r, c in _neighbours(cell, rows, cols):
            if mat[r][c] == 1 and distances[r][c] == 0:
                distances[r][c] = dist + 1
                queue.append(((r, c), dist + 1))
    return distances


def flood_fill(
    image: Sequence[Sequence[int]], sr: int, sc: int, color: int
) -> list[list[int]]:
    """A copy of ``image`` with the region around ``(sr, sc)`` painted ``color``."""
    rows, cols = _dimensions(image)
    if not (0 <= sr < rows and 0 <= sc < cols):
        raise IndexError("start cell is outside the image")
    result = [list(row) for row in image]
    original = image[sr][sc]
    if original == color:
        return result
    for r, c in _reach(image, [(sr, sc)], lambda value: value == original):
        result[r][c] = color
    return result