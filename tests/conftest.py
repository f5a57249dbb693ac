import matplotlib
matplotlib.use("Agg")  # headless backend for the test run

import pytest

from causal_loop import MatplotlibSurface
from causal_loop.drifting_goals import drifting_goals_diagram


@pytest.fixture
def diagram():
    return drifting_goals_diagram()


@pytest.fixture
def surface(diagram):
    s = MatplotlibSurface.from_config(diagram.config)
    yield s
    s.close()
