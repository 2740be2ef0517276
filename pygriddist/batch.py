import logging
from concurrent.futures import ProcessPoolExecutor
from functools import partial
from typing import Iterable, Iterator

import numpy as np

from .dist_table import solve
from .problem import Problem

logger = logging.getLogger(__name__)


def iter_solutions(problems: Iterable[Problem], strict: bool = False) -> Iterator[np.ndarray]:
    """Solve problems one after another, yielding each solution in order."""
    for i, problem in enumerate(problems):
        logger.debug("problem %d: %dx%d", i, problem.rows, problem.cols)
        yield solve(problem, strict=strict)


def solve_batch(
    problems: Iterable[Problem],
    workers: int = 1,
    strict: bool = False,
) -> list[np.ndarray]:
    """Solve a batch of independent problems.

    With workers > 1 whole problems are distributed over a process pool;
    a single solve always runs to completion in one process. Results keep
    the input order.
    """
    problems = list(problems)
    logger.info("solving %d problems with %d worker(s)", len(problems), workers)

    if workers <= 1 or len(problems) <= 1:
        return list(iter_solutions(problems, strict=strict))

    with ProcessPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(partial(solve, strict=strict), problems))
