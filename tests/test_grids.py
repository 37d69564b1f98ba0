import pytest

from algoshelf.grids import (
    flood_fill,
    num_enclaves,
    num_islands,
    oranges_rotting,
    shortest_path_binary_matrix,
    solve_surrounded,
    update_matrix,
)


def test_oranges_single_row_takes_one_minute_per_orange():
    row = [2, 1, 1, 1, 1]
    assert oranges_rotting([row]) == len(row) - 1


def test_oranges_unreachable_fresh_returns_minus_one():
    assert oranges_rotting([[2, 0, 1]]) == -1


def test_oranges_does_not_modify_grid():
    grid = [[2, 1], [1, 1]]
    snapshot = [row[:] for row in grid]
    oranges_rotting(grid)
    assert grid == snapshot


def test_oranges_empty_grid_rejected():
    with pytest.raises(ValueError):
        oranges_rotting([])


def test_enclaves_count_interior_land():
    grid = [
        [0, 0, 0, 0, 0],
        [0, 1, 1, 0, 0],
        [0, 1, 0, 1, 0],
        [0, 0, 0, 0, 0],
    ]
    interior = sum(value for row in grid for value in row)
    assert num_enclaves(grid) == interior


def test_enclaves_land_touching_border_escapes():
    grid = [[1, 1, 1], [1, 1, 1], [1, 1, 1]]
    assert num_enclaves(grid) == 0


def test_shortest_path_open_grid_is_diagonal():
    for n in range(1, 6):
        grid = [[0] * n for _ in range(n)]
        assert shortest_path_binary_matrix(grid) == n


def test_shortest_path_blocked_start_or_end():
    assert shortest_path_binary_matrix([[1, 0], [0, 0]]) == -1
    assert shortest_path_binary_matrix([[0, 0], [0, 1]]) == -1


def test_shortest_path_walled_off():
    grid = [[0, 1, 0], [1, 1, 0], [0, 0, 0]]
    assert shortest_path_binary_matrix(grid) == -1


def test_surrounded_regions_flipped():
    board = [
        list("XXXX"),
        list("XOOX"),
        list("XXOX"),
        list("XOXX"),
    ]
    solve_surrounded(board)
    assert board == [
        list("XXXX"),
        list("XXXX"),
        list("XXXX"),
        list("XOXX"),
    ]


def test_surrounded_is_idempotent_and_keeps_border():
    board = [list("OXO"), list("XOX"), list("OXO")]
    solve_surrounded(board)
    once = [row[:] for row in board]
    solve_surrounded(board)
    assert board == once
    assert board[0][0] == board[0][2] == board[2][0] == board[2][2] == "O"
    assert board[1][1] == "X"


def test_islands_checkerboard_counts_each_land_cell():
    grid = [["1" if (r + c) % 2 == 0 else "0" for c in range(5)] for r in range(4)]
    land = sum(row.count("1") for row in grid)
    assert num_islands(grid) == land


def test_islands_one_connected_block():
    grid = [list("11110"), list("11010"), list("11000"), list("00000")]
    assert num_islands(grid) == 1


def test_update_matrix_invariants():
    mat = [[0, 1, 1, 1], [1, 1, 1, 1], [1, 1, 0, 1]]
    dist = update_matrix(mat)
    rows, cols = len(mat), len(mat[0])
    for r in range(rows):
        for c in range(cols):
            if mat[r][c] == 0:
                assert dist[r][c] == 0
                continue
            around = [
                dist[r + dr][c + dc]
                for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1))
                if 0 <= r + dr < rows and 0 <= c + dc < cols
            ]
            assert dist[r][c] >= 1
            assert min(around) == dist[r][c] - 1


def test_update_matrix_single_row_distances():
    row = [0, 1, 1, 1]
    assert update_matrix([row]) == [list(range(len(row)))]


def test_flood_fill_paints_region_only():
    image = [[1, 1, 1], [1, 1, 0], [1, 0, 1]]
    result = flood_fill(image, 1, 1, 2)
    assert result[2][2] == image[2][2]
    assert result[1][2] == image[1][2]
    for r, row in enumerate(image):
        for c, value in enumerate(row):
            if (r, c) != (2, 2) and value == 1:
                assert result[r][c] == 2
    assert image[1][1] == 1


def test_flood_fill_same_color_returns_equal_copy():
    image = [[0, 0], [0, 0]]
    result = flood_fill(image, 0, 0, 0)
    assert result == image
    assert result is not image


def test_flood_fill_start_outside_rejected():
    with pytest.raises(IndexError):
        flood_fill([[1]], 1, 0, 2)