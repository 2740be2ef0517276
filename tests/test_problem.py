import numpy as np
import pytest

from pygriddist import MalformedProblemError, Problem


def test_list_matrix_is_normalised():
    p = Problem(2, 3, [[0, 1, 0], [0, 0, 0]], 1)
    assert isinstance(p.matrix, np.ndarray)
    assert p.shape == (2, 3)
    assert not p.matrix.flags.writeable


def test_caller_array_is_not_aliased():
    m = np.zeros((2, 2), dtype=int)
    p = Problem(2, 2, m, 1)
    m[0, 0] = 1
    assert p.matrix[0, 0] == 0


def test_from_matrix():
    p = Problem.from_matrix([[0], [1], [0]], 1)
    assert (p.rows, p.cols) == (3, 1)
    p = Problem.from_matrix(np.ones((4, 5), dtype=int), 1)
    assert (p.rows, p.cols) == (4, 5)


@pytest.mark.parametrize(
    "rows, cols, matrix",
    [
        (3, 2, [[0, 0], [0, 0]]),
        (2, 3, [[0, 0], [0, 0]]),
        (2, 2, [[0, 0], [0]]),
        (0, 0, []),
        (1, 0, [[]]),
    ],
)
def test_malformed(rows, cols, matrix):
    with pytest.raises(MalformedProblemError):
        Problem(rows, cols, matrix, 1)


def test_malformed_array_shape():
    with pytest.raises(MalformedProblemError):
        Problem(2, 2, np.zeros((2, 3), dtype=int), 1)
    with pytest.raises(MalformedProblemError):
        Problem.from_matrix(np.zeros(4, dtype=int), 1)


def test_malformed_is_value_error():
    with pytest.raises(ValueError):
        Problem.from_matrix([], 1)
