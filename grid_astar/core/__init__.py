"""core package."""

from .grid import Cell, Grid, OutOfBoundsError
from .priority_queue import MinHeapPriorityQueue
from .problem import GridSearchProblem, SearchProblem

__all__ = [
    "Cell",
    "Grid",
    "OutOfBoundsError",
    "MinHeapPriorityQueue",
    "GridSearchProblem",
    "SearchProblem",
]
