import os

import numpy as np
import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

TARGET = 1


@pytest.fixture
def rng():
    return np.random.default_rng(0)


@pytest.fixture
def center_problem():
    from pygriddist import Problem

    return Problem(3, 3, [[0, 0, 0], [0, TARGET, 0], [0, 0, 0]], TARGET)


@pytest.fixture
def batch_text():
    return "2\n3 3\n000\n010\n000\n1 6\n000001\n"
