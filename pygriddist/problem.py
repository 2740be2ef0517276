from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .grid_utils import Grid


class MalformedProblemError(ValueError):
    """Matrix shape disagrees with the declared dimensions."""


class NoTargetError(ValueError):
    """No cell of the grid holds the target value."""


@dataclass
class Problem:
    """One grid problem: find the distance of every cell to the nearest target.

    matrix may be passed as nested lists or as an ndarray. It is stored as a
    read-only integer array so the solver can never write through it.
    """

    rows: int
    cols: int
    matrix: Grid
    target: int

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise MalformedProblemError(
                f"grid must be at least 1x1, got {self.rows}x{self.cols}"
            )

        if not isinstance(self.matrix, np.ndarray):
            self.matrix = _from_rows(self.matrix, self.rows, self.cols)

        if self.matrix.ndim != 2 or self.matrix.shape != (self.rows, self.cols):
            raise MalformedProblemError(
                f"matrix shape {self.matrix.shape} does not match "
                f"declared ({self.rows}, {self.cols})"
            )

        matrix = np.array(self.matrix, dtype=np.int64)
        matrix.setflags(write=False)
        self.matrix = matrix

    @classmethod
    def from_matrix(cls, matrix: Sequence[Sequence[int]] | Grid, target: int) -> "Problem":
        if isinstance(matrix, np.ndarray):
            if matrix.ndim != 2:
                raise MalformedProblemError(f"matrix must be 2-D, got {matrix.ndim}-D")
            rows, cols = matrix.shape
        else:
            rows = len(matrix)
            cols = len(matrix[0]) if rows > 0 else 0
        return cls(rows, cols, matrix, target)

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols


def _from_rows(matrix: Sequence[Sequence[int]], rows: int, cols: int) -> Grid:
    if len(matrix) != rows:
        raise MalformedProblemError(f"expected {rows} rows, got {len(matrix)}")
    for i, row in enumerate(matrix):
        if len(row) != cols:
            raise MalformedProblemError(
                f"row {i} has {len(row)} columns, expected {cols}"
            )
    return np.asarray(matrix)
