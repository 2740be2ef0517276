import os
from typing import Iterable

import numpy as np

from .problem import Problem


class BatchFormatError(ValueError):
    def __init__(self, lineno: int, message: str):
        super().__init__(f"line {lineno}: {message}")
        self.lineno = lineno


def _parse_int(text: str, lineno: int) -> int:
    try:
        return int(text, 10)
    except ValueError:
        raise BatchFormatError(lineno, f"expected an integer, got {text!r}") from None


def parse_batch(text: str, target: int = 1) -> list[Problem]:
    """Parse a batch of problems.

    Format: a problem count, then per problem a "rows cols" header followed
    by rows lines of cols digits each.
    """
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise BatchFormatError(1, "missing problem count")

    total = _parse_int(lines[0].strip(), 1)
    if total < 0:
        raise BatchFormatError(1, f"problem count must not be negative, got {total}")
    problems: list[Problem] = []
    i = 1
    for _ in range(total):
        if i >= len(lines):
            raise BatchFormatError(i + 1, "missing problem header")
        header = lines[i].split()
        if len(header) != 2:
            raise BatchFormatError(i + 1, f"expected 'rows cols', got {lines[i]!r}")
        rows, cols = (_parse_int(h, i + 1) for h in header)
        i += 1

        matrix: list[list[int]] = []
        for _ in range(rows):
            if i >= len(lines):
                raise BatchFormatError(i + 1, "missing grid row")
            row = lines[i].strip()
            if len(row) != cols or not all(ch in "0123456789" for ch in row):
                raise BatchFormatError(i + 1, f"expected {cols} digits, got {row!r}")
            matrix.append([int(ch) for ch in row])
            i += 1

        problems.append(Problem(rows, cols, matrix, target))

    if i < len(lines):
        raise BatchFormatError(i + 1, f"unexpected data after {total} problem(s)")

    return problems


def load_batch(filename: str, target: int = 1) -> list[Problem]:
    with open(filename, encoding="utf-8") as f:
        return parse_batch(f.read(), target)


def format_solution(solution: np.ndarray) -> str:
    return "\n".join(" ".join(str(int(d)) for d in row) for row in solution)


def save_solutions(solutions: Iterable[np.ndarray], filename: str) -> None:
    dirname = os.path.dirname(filename)
    if len(dirname) > 0:
        os.makedirs(dirname, exist_ok=True)
    with open(filename, "w") as f:
        for solution in solutions:
            f.write(format_solution(solution) + "\n")
