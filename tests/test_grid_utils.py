import numpy as np

from pygriddist.grid_utils import (
    create_grid,
    find_positions_with_value,
    get_neighbors,
    manhattan_distance,
    set_positions_to_value,
)


def test_create_grid():
    assert create_grid(2, 2, 0).tolist() == [[0, 0], [0, 0]]


def test_create_grid_rows_differ_from_cols():
    grid = create_grid(3, 2, 7)
    assert grid.shape == (3, 2)
    assert (grid == 7).all()


def test_manhattan_distance():
    assert manhattan_distance((0, 0), (1, 1)) == 2
    assert manhattan_distance((1, 1), (0, 0)) == 2
    assert manhattan_distance((4, 2), (4, 2)) == 0


def test_neighbors_fixed_order():
    grid = create_grid(3, 3)
    assert get_neighbors(grid, (1, 1)) == [(0, 1), (2, 1), (1, 0), (1, 2)]


def test_neighbors_exclude_self_and_diagonals():
    grid = create_grid(3, 3)
    neigh = get_neighbors(grid, (1, 1))
    assert (1, 1) not in neigh
    assert all(manhattan_distance(n, (1, 1)) == 1 for n in neigh)


def test_neighbors_clipped_at_border():
    grid = create_grid(3, 3)
    assert get_neighbors(grid, (0, 0)) == [(1, 0), (0, 1)]
    assert get_neighbors(grid, (2, 2)) == [(1, 2), (2, 1)]


def test_neighbors_single_cell():
    assert get_neighbors(create_grid(1, 1), (0, 0)) == []


def test_neighbors_of_invalid_coord():
    assert get_neighbors(create_grid(2, 2), (5, 0)) == []


def test_find_positions_row_major():
    grid = np.array([[1, 0], [0, 1]])
    assert find_positions_with_value(grid, 1) == [(0, 0), (1, 1)]


def test_find_positions_absent():
    assert find_positions_with_value(np.zeros((2, 2), dtype=int), 1) == []


def test_set_positions_to_value():
    grid = create_grid(2, 2)
    set_positions_to_value(grid, [(0, 0), (1, 1)], 10)
    assert grid.tolist() == [[10, 0], [0, 10]]
