"""Load and save grid problem snapshots."""

from __future__ import annotations

import gzip
import json
from pathlib import Path

from ..core.problem import GridSearchProblem
from .serializer import problem_from_dict, problem_to_dict


def save_problem(
    problem: GridSearchProblem, path: str | Path, *, gzip_compress: bool = True
) -> None:
    """Write ``problem`` to ``path`` as JSON.

    Parameters
    ----------
    problem:
        The :class:`~grid_astar.core.problem.GridSearchProblem` to serialize.
    path:
        Destination file path.
    gzip_compress:
        If ``True`` (default), compress the JSON using gzip.
    """

    text = json.dumps(problem_to_dict(problem), indent=2)
    path = Path(path)
    if gzip_compress:
        with gzip.open(path, "wt", encoding="utf-8") as fh:
            fh.write(text)
    else:
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(text)


def load_problem(path: str | Path, *, gzip_compress: bool = True) -> GridSearchProblem:
    """Read a snapshot from ``path`` and return a new problem."""

    path = Path(path)
    if gzip_compress:
        with gzip.open(path, "rt", encoding="utf-8") as fh:
            data = json.load(fh)
    else:
        with open(path, "r", encoding="utf-8") as fh:
            data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"Malformed problem snapshot in {path}")
    return problem_from_dict(data)


__all__ = ["save_problem", "load_problem"]
