"""Random wall placement with random start and goal cells."""

from __future__ import annotations

import logging
from random import Random
from typing import List

from ..config import GridConfig, SearchConfig
from ..core.grid import Cell, Grid
from ..core.problem import GridSearchProblem
from .base_scenario import BaseScenario

logger = logging.getLogger(__name__)


def white_noise(width: int, height: int, rnd: Random) -> list[list[float]]:
    """Return ``height`` x ``width`` grid of random floats in ``[0, 1)``."""

    return [[rnd.random() for _ in range(width)] for _ in range(height)]


def scatter_walls(grid: Grid, wall_probability: float, rnd: Random) -> int:
    """Mark cells unwalkable with ``wall_probability``; return the wall count."""

    walls = 0
    noise = white_noise(grid.width, grid.height, rnd)
    for y, row in enumerate(noise):
        for x, value in enumerate(row):
            walkable = value >= wall_probability
            grid.set_walkable(x, y, walkable)
            if not walkable:
                walls += 1
    return walls


def randomize_start_and_goal(problem: GridSearchProblem, rnd: Random) -> None:
    """Place start and goal on random walkable cells.

    Start and goal may coincide when only one walkable cell exists.
    """

    walkable: List[Cell] = [cell for cell in problem.grid.cells() if cell.walkable]
    if not walkable:
        raise ValueError("grid has no walkable cell for start and goal")
    start = rnd.choice(walkable)
    goal = rnd.choice(walkable)
    problem.set_start(start.x, start.y)
    problem.set_goal(goal.x, goal.y)


class RandomWallsScenario(BaseScenario):
    """Grid with randomly scattered walls.

    Explicit ``start``/``goal`` in the config are kept and forced walkable;
    otherwise both are drawn from the walkable cells.
    """

    def __init__(self, rnd: Random | None = None) -> None:
        self._rnd = rnd

    def build(self, grid_cfg: GridConfig, search_cfg: SearchConfig) -> GridSearchProblem:
        rnd = self._rnd or Random(grid_cfg.seed)
        grid = Grid(grid_cfg.width, grid_cfg.height)
        walls = scatter_walls(grid, grid_cfg.wall_probability, rnd)
        problem = GridSearchProblem(grid, heuristic=search_cfg.heuristic)

        if grid_cfg.start is None or grid_cfg.goal is None:
            randomize_start_and_goal(problem, rnd)
        if grid_cfg.start is not None:
            problem.set_start(*grid_cfg.start)
            problem.start.set_walkable(True)
        if grid_cfg.goal is not None:
            problem.set_goal(*grid_cfg.goal)
            problem.goal.set_walkable(True)

        logger.info(
            "[Scenario] %dx%d grid with %d walls, start %s goal %s",
            grid.width,
            grid.height,
            walls,
            problem.start,
            problem.goal,
        )
        return problem

    def get_name(self) -> str:
        return "Random Walls"


__all__ = [
    "RandomWallsScenario",
    "randomize_start_and_goal",
    "scatter_walls",
    "white_noise",
]
