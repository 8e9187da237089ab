"""Grid built from the text rows of ``grid.map``."""

from __future__ import annotations

from ..config import GridConfig, SearchConfig
from ..core.grid import Grid
from ..core.problem import GridSearchProblem
from .base_scenario import BaseScenario


class MapScenario(BaseScenario):
    def build(self, grid_cfg: GridConfig, search_cfg: SearchConfig) -> GridSearchProblem:
        if not grid_cfg.map:
            raise ValueError("MapScenario requires grid.map rows in the config")
        grid = Grid.from_rows(grid_cfg.map)
        return GridSearchProblem(
            grid,
            start=grid_cfg.start,
            goal=grid_cfg.goal,
            heuristic=search_cfg.heuristic,
        )

    def get_name(self) -> str:
        return "Fixed Map"


__all__ = ["MapScenario"]
