from math import comb

from algoshelf.matrix import pascal_triangle, set_zeroes, spiral_order


def test_spiral_order_square():
    assert spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == [1, 2, 3, 6, 9, 8, 7, 4, 5]


def test_spiral_order_visits_every_cell_once():
    matrix = [[r * 10 + c for c in range(4)] for r in range(3)]
    result = spiral_order(matrix)
    assert sorted(result) == sorted(v for row in matrix for v in row)
    assert result[:4] == matrix[0]
    assert result[4:6] == [matrix[1][3], matrix[2][3]]


def test_spiral_order_single_column_and_empty():
    column = [[4], [8], [15], [16]]
    assert spiral_order(column) == [row[0] for row in column]
    assert spiral_order([]) == []


def test_set_zeroes_pinned():
    matrix = [[1, 1, 1], [1, 0, 1], [1, 1, 1]]
    set_zeroes(matrix)
    assert matrix == [[1, 0, 1], [0, 0, 0], [1, 0, 1]]


def test_set_zeroes_invariants():
    original = [[0, 1, 2, 0], [3, 4, 5, 2], [1, 3, 1, 5]]
    matrix = [list(row) for row in original]
    set_zeroes(matrix)
    assert matrix[0] == [0, 0, 0, 0]
    assert all(row[0] == 0 and row[3] == 0 for row in matrix)
    for i in (1, 2):
        for j in (1, 2):
            assert matrix[i][j] == original[i][j]


def test_pascal_triangle_matches_binomials():
    rows = pascal_triangle(12)
    assert len(rows) == 12
    for n, row in enumerate(rows):
        assert row == [comb(n, k) for k in range(n + 1)]


def test_pascal_triangle_interior_sums():
    rows = pascal_triangle(8)
    for above, row in zip(rows, rows[1:]):
        assert row[0] == row[-1] == 1
        assert row[1:-1] == [a + b for a, b in zip(above, above[1:])]


def test_pascal_triangle_no_rows():
    assert pascal_triangle(0) == []