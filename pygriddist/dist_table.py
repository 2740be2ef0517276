import logging
from collections import deque
from dataclasses import dataclass, field

import numpy as np

from .grid_utils import Coord, Grid, find_positions_with_value, get_neighbors, is_valid_coord
from .problem import NoTargetError, Problem

logger = logging.getLogger(__name__)

UNREACHED: int = int(np.iinfo(np.int32).max)  # no real distance hits this


@dataclass
class DistTable:
    """Lazy multi-source BFS distance table.

    All sources are seeded at distance 0 before any expansion, so the
    frontier advances one ring at a time and the first distance written to
    a cell is its minimum. Visited state is kept in its own boolean layer;
    a 0 in the table never doubles as "not yet reached".

    Distances are computed on demand: get(coord) runs BFS only as far as
    needed to settle coord. fill() runs it to completion.
    """

    grid: Grid
    sources: list[Coord]
    queue: deque[Coord] = field(init=False)
    table: np.ndarray = field(init=False)
    visited: np.ndarray = field(init=False)

    def __post_init__(self) -> None:
        self.table = np.full(self.grid.shape, UNREACHED, dtype=np.int32)
        self.visited = np.zeros(self.grid.shape, dtype=bool)
        self.queue = deque()
        for s in self.sources:
            if not is_valid_coord(self.grid, s):
                raise ValueError(f"source {s} is outside the {self.grid.shape} grid")
            if self.visited[s]:
                continue
            self.table[s] = 0
            self.visited[s] = True
            self.queue.append(s)

    def _expand(self) -> None:
        u = self.queue.popleft()
        d = int(self.table[u])
        for v in get_neighbors(self.grid, u):
            if not self.visited[v]:
                self.table[v] = d + 1
                self.visited[v] = True
                self.queue.append(v)

    def get(self, target: Coord) -> int:
        """Return distance from target to the nearest source.

        Returns UNREACHED if target is outside the grid or no source exists.
        """
        if not is_valid_coord(self.grid, target):
            return UNREACHED

        # Continue BFS until target is reached or the queue is exhausted
        while not self.visited[target] and self.queue:
            self._expand()

        return int(self.table[target])

    def fill(self) -> np.ndarray:
        while self.queue:
            self._expand()
        return self.table

    @property
    def done(self) -> bool:
        return not self.queue


def solve(problem: Problem, strict: bool = False) -> np.ndarray:
    """Distance from every cell to the nearest cell equal to problem.target.

    If the target does not occur, every cell is UNREACHED, or NoTargetError
    is raised when strict is set.
    """
    sources = find_positions_with_value(problem.matrix, problem.target)
    logger.debug(
        "solving %dx%d grid, target=%d, %d sources",
        problem.rows,
        problem.cols,
        problem.target,
        len(sources),
    )

    if not sources:
        if strict:
            raise NoTargetError(f"target {problem.target} not found in grid")
        logger.warning(
            "target %d not found in %dx%d grid, all cells unreached",
            problem.target,
            problem.rows,
            problem.cols,
        )

    return DistTable(problem.matrix, sources).fill()
