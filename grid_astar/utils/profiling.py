"""cProfile helpers for measuring search performance."""

from __future__ import annotations

import cProfile
import pstats
import time
from pathlib import Path
from typing import Callable

from ..search.astar import AStar
from .observer import record_search


def profile_searches(
    n: int,
    make_engine: Callable[[], AStar],
    out_path: str | Path = "profile.prof",
) -> pstats.Stats:
    """Profile ``n`` searches and dump stats to ``out_path``.

    Parameters
    ----------
    n:
        Number of searches to run.
    make_engine:
        Factory returning a fresh engine; engines are single-use.
    out_path:
        File to write cProfile data to.

    Returns
    -------
    pstats.Stats
        Profiling statistics for the execution.
    """

    path = Path(out_path)
    profiler = cProfile.Profile()
    profiler.enable()
    for _ in range(n):
        engine = make_engine()
        began = time.perf_counter()
        result = engine.search()
        record_search(result, time.perf_counter() - began)
    profiler.disable()
    profiler.dump_stats(str(path))
    return pstats.Stats(profiler)


__all__ = ["profile_searches"]
