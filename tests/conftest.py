# tests/conftest.py
import pytest

from grid_astar.core.grid import Grid
from grid_astar.core.problem import GridSearchProblem
from grid_astar.utils import observer


def _make_problem(rows, start=(0, 0), goal=None, heuristic="manhattan"):
    grid = Grid.from_rows(rows)
    return GridSearchProblem(grid, start=start, goal=goal, heuristic=heuristic)


@pytest.fixture
def make_problem():
    """Factory building a problem from text rows (row index is ``y``)."""
    return _make_problem


@pytest.fixture
def open_3x3():
    return _make_problem(["...", "...", "..."], start=(0, 0), goal=(2, 2))


@pytest.fixture(autouse=True)
def _clean_observer():
    observer.reset()
    yield
    observer.reset()
