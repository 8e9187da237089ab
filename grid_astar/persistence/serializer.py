"""Helpers for converting a grid search problem to JSON-ready data."""

from __future__ import annotations

from typing import Any, Dict, List

from ..core.grid import Grid
from ..core.problem import GridSearchProblem


def problem_to_dict(problem: GridSearchProblem) -> Dict[str, Any]:
    """Serialize ``problem`` into a dictionary."""

    grid = problem.grid
    walkable: List[List[bool]] = []
    costs: List[List[float]] = []
    for y in range(grid.height):
        walkable.append([grid.get_cell(x, y).walkable for x in range(grid.width)])
        costs.append([grid.get_cell(x, y).walk_cost for x in range(grid.width)])

    return {
        "size": [grid.width, grid.height],
        "walkable": walkable,
        "walk_cost": costs,
        "start": [problem.start.x, problem.start.y],
        "goal": [problem.goal.x, problem.goal.y],
        "heuristic": problem.heuristic_name,
    }


def problem_from_dict(data: Dict[str, Any]) -> GridSearchProblem:
    """Create a problem from ``data`` produced by :func:`problem_to_dict`."""

    try:
        width, height = data["size"]
        walkable = data["walkable"]
        costs = data.get("walk_cost")
        start = data["start"]
        goal = data["goal"]
        if not _matches_size(walkable, width, height):
            raise ValueError("walkable rows do not match size")
        if costs is not None and not _matches_size(costs, width, height):
            raise ValueError("walk_cost rows do not match size")

        grid = Grid(int(width), int(height))
        for y, row in enumerate(walkable):
            for x, flag in enumerate(row):
                grid.set_walkable(x, y, bool(flag))
                if costs is not None:
                    grid.set_walk_cost(x, y, costs[y][x])

        return GridSearchProblem(
            grid,
            start=tuple(start),
            goal=tuple(goal),
            heuristic=data.get("heuristic", "manhattan"),
        )
    except (KeyError, TypeError, ValueError, IndexError) as exc:
        raise ValueError(f"Malformed problem snapshot: {exc}") from exc


def _matches_size(rows: Any, width: int, height: int) -> bool:
    return (
        isinstance(rows, list)
        and len(rows) == height
        and all(isinstance(row, list) and len(row) == width for row in rows)
    )


__all__ = ["problem_to_dict", "problem_from_dict"]
