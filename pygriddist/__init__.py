from .batch import iter_solutions, solve_batch
from .batch_io import BatchFormatError, format_solution, load_batch, parse_batch, save_solutions
from .dist_table import UNREACHED, DistTable, solve
from .grid_utils import create_grid, manhattan_distance, set_positions_to_value
from .problem import MalformedProblemError, NoTargetError, Problem

__all__ = [
    "BatchFormatError",
    "DistTable",
    "MalformedProblemError",
    "NoTargetError",
    "Problem",
    "UNREACHED",
    "create_grid",
    "format_solution",
    "iter_solutions",
    "load_batch",
    "manhattan_distance",
    "parse_batch",
    "save_solutions",
    "set_positions_to_value",
    "solve",
    "solve_batch",
]
