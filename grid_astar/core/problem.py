"""Search problem capability and its grid realization."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Callable, Dict, Generic, List, Sequence, Tuple, TypeVar, Union

from .grid import Cell, Grid


S = TypeVar("S")

CellRef = Union[Cell, Tuple[int, int]]


class SearchProblem(ABC, Generic[S]):
    """Everything a best-first search needs to know about a state space."""

    @abstractmethod
    def get_start(self) -> S:
        pass

    @abstractmethod
    def get_goal(self) -> S:
        pass

    @abstractmethod
    def is_goal_state(self, state: S) -> bool:
        pass

    @abstractmethod
    def get_successors(self, state: S) -> List[S]:
        """Return states reachable from ``state`` in one step."""
        pass

    @abstractmethod
    def get_path_cost(self, path: Sequence[S]) -> float:
        """Return the accumulated cost of ``path``."""
        pass

    def heuristic(self, state: S) -> float:
        """Estimated remaining cost from ``state``; zero unless overridden."""

        return 0


class GridSearchProblem(SearchProblem[Cell]):
    """Shortest path between two cells of a :class:`Grid`.

    ``start`` and ``goal`` default to the first and last cell of the grid. The
    heuristic is picked by name from :attr:`HEURISTICS`; Manhattan distance is
    the only one guaranteed consistent on a 4-connected grid with unit costs.
    """

    HEURISTICS = ("manhattan", "euclidean", "null")

    def __init__(
        self,
        grid: Grid,
        start: CellRef | None = None,
        goal: CellRef | None = None,
        heuristic: str = "manhattan",
    ) -> None:
        self.grid = grid
        self.start: Cell = grid.get_cell(0, 0)
        self.goal: Cell = grid.get_cell(grid.width - 1, grid.height - 1)
        if start is not None:
            self.set_start(*_coords(start))
        if goal is not None:
            self.set_goal(*_coords(goal))
        self._heuristics: Dict[str, Callable[[Cell], float]] = {
            "manhattan": self.manhattan_heuristic,
            "euclidean": self.euclidean_heuristic,
            "null": self.null_heuristic,
        }
        self.heuristic_name = ""
        self.set_heuristic(heuristic)

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------
    def set_start(self, x: int, y: int) -> None:
        self.start = self.grid.get_cell(x, y)

    def set_goal(self, x: int, y: int) -> None:
        self.goal = self.grid.get_cell(x, y)

    def set_heuristic(self, name: str) -> None:
        if name not in self._heuristics:
            raise ValueError(
                f"Unknown heuristic {name!r}; expected one of {', '.join(self.HEURISTICS)}"
            )
        self.heuristic_name = name

    # ------------------------------------------------------------------
    # SearchProblem API
    # ------------------------------------------------------------------
    def get_start(self) -> Cell:
        return self.start

    def get_goal(self) -> Cell:
        return self.goal

    def is_goal_state(self, state: Cell) -> bool:
        return state == self.goal

    def get_successors(self, state: Cell) -> List[Cell]:
        return self.grid.neighbors(state.x, state.y)

    def get_path_cost(self, path: Sequence[Cell]) -> float:
        """Sum of ``walk_cost`` for every cell the path leaves.

        The last cell is not charged: moving costs whatever the cell being
        left costs.
        """

        return sum(cell.walk_cost for cell in path[:-1])

    def heuristic(self, state: Cell) -> float:
        return self._heuristics[self.heuristic_name](state)

    # ------------------------------------------------------------------
    # Heuristics
    # ------------------------------------------------------------------
    def manhattan_heuristic(self, state: Cell) -> float:
        return abs(state.x - self.goal.x) + abs(state.y - self.goal.y)

    def euclidean_heuristic(self, state: Cell) -> float:
        return math.hypot(state.x - self.goal.x, state.y - self.goal.y)

    def null_heuristic(self, state: Cell) -> float:
        return 0


def _coords(ref: CellRef) -> Tuple[int, int]:
    if isinstance(ref, Cell):
        return ref.x, ref.y
    x, y = ref
    return int(x), int(y)


__all__ = ["SearchProblem", "GridSearchProblem"]
