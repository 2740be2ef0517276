from typing import Iterable, TypeAlias

import numpy as np

# row, col
Grid: TypeAlias = np.ndarray
Coord: TypeAlias = tuple[int, int]

# up, down, left, right
NEIGHBOR_OFFSETS: tuple[Coord, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def create_grid(rows: int, cols: int, value: int = 0) -> Grid:
    return np.full((rows, cols), value, dtype=np.int32)


def is_valid_coord(grid: Grid, coord: Coord) -> bool:
    row, col = coord
    if row < 0 or row >= grid.shape[0] or col < 0 or col >= grid.shape[1]:
        return False
    return True


def get_neighbors(grid: Grid, coord: Coord) -> list[Coord]:
    # coord: row, col
    neigh: list[Coord] = []

    # check valid input
    if not is_valid_coord(grid, coord):
        return neigh

    row, col = coord
    for d_row, d_col in NEIGHBOR_OFFSETS:
        v = (row + d_row, col + d_col)
        if is_valid_coord(grid, v):
            neigh.append(v)

    return neigh


def manhattan_distance(p: Coord, q: Coord) -> int:
    return abs(p[0] - q[0]) + abs(p[1] - q[1])


def find_positions_with_value(grid: Grid, value: int) -> list[Coord]:
    """Positions holding value, in row-major scan order."""
    rows, cols = np.nonzero(grid == value)
    return [(int(r), int(c)) for r, c in zip(rows, cols)]


def set_positions_to_value(grid: Grid, positions: Iterable[Coord], value: int) -> None:
    for coord in positions:
        grid[coord] = value
