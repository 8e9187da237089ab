from random import Random

import pytest

from grid_astar.config import GridConfig, SearchConfig
from grid_astar.core.grid import Grid
from grid_astar.core.problem import GridSearchProblem
from grid_astar.scenarios.map_scenario import MapScenario
from grid_astar.scenarios.random_scenario import (
    RandomWallsScenario,
    randomize_start_and_goal,
    scatter_walls,
    white_noise,
)


def test_white_noise_is_deterministic():
    a = white_noise(4, 3, Random(5))
    b = white_noise(4, 3, Random(5))
    assert a == b
    assert len(a) == 3 and all(len(row) == 4 for row in a)
    assert all(0 <= v < 1 for row in a for v in row)


def test_scatter_walls_extremes():
    grid = Grid(5, 5)
    assert scatter_walls(grid, 0.0, Random(1)) == 0
    assert all(c.walkable for c in grid.cells())
    assert scatter_walls(grid, 1.0, Random(1)) == 25
    assert not any(c.walkable for c in grid.cells())


def test_randomize_picks_walkable_cells():
    grid = Grid.from_rows(["#.#", "###", "#.#"])
    problem = GridSearchProblem(grid)
    randomize_start_and_goal(problem, Random(3))
    assert problem.start.walkable and problem.goal.walkable


def test_randomize_without_walkable_cells():
    grid = Grid.from_rows(["##", "##"])
    with pytest.raises(ValueError):
        randomize_start_and_goal(GridSearchProblem(grid), Random(0))


def test_random_scenario_is_seeded():
    cfg = GridConfig(width=12, height=8, wall_probability=0.3, seed=42)
    a = RandomWallsScenario().build(cfg, SearchConfig())
    b = RandomWallsScenario().build(cfg, SearchConfig())
    assert a.grid.to_text() == b.grid.to_text()
    assert (a.start, a.goal) == (b.start, b.goal)
    assert a.start.walkable and a.goal.walkable
    assert RandomWallsScenario().get_name() == "Random Walls"


def test_random_scenario_explicit_endpoints_forced_walkable():
    cfg = GridConfig(width=4, height=4, wall_probability=1.0, start=(0, 0), goal=(3, 3))
    problem = RandomWallsScenario(Random(0)).build(cfg, SearchConfig(heuristic="null"))
    assert problem.start.pos == (0, 0) and problem.start.walkable
    assert problem.goal.pos == (3, 3) and problem.goal.walkable
    assert problem.heuristic_name == "null"


def test_map_scenario_builds_problem():
    cfg = GridConfig(map=["..#", "...", "#.."], start=(0, 0), goal=(2, 2))
    problem = MapScenario().build(cfg, SearchConfig())
    assert problem.grid.to_text() == "..#\n...\n#.."
    assert problem.goal.pos == (2, 2)
    assert MapScenario().get_name() == "Fixed Map"


def test_map_scenario_requires_rows():
    with pytest.raises(ValueError):
        MapScenario().build(GridConfig(), SearchConfig())
