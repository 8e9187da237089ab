# grid_astar/main.py
"""Command line bootstrap: build a grid problem and search it."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
import time
from pathlib import Path
from random import Random
from typing import List, Optional

from dotenv import load_dotenv

from .config import CONFIG, Config, load_config
from .core.problem import GridSearchProblem
from .persistence.save_load import load_problem, save_problem
from .scenarios.map_scenario import MapScenario
from .scenarios.random_scenario import RandomWallsScenario
from .search.astar import AStar, SearchResult
from .utils import observer
from .utils.profiling import profile_searches
from .utils.terminal_view import TerminalView


log_level_str = CONFIG.logging.global_level
numeric_level = getattr(logging, log_level_str, logging.INFO)
logging.basicConfig(
    level=numeric_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    force=True
)
logger = logging.getLogger(__name__)

# Apply per-module levels if defined
if CONFIG.logging.module_levels:
    for module_name, level_str in CONFIG.logging.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if module_numeric_level is not None:
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)

CONFIG_ENV_VAR = "GRID_ASTAR_CONFIG"


def resolve_config(config_path: str | Path | None = None) -> Config:
    """Return the config at ``config_path``, ``$GRID_ASTAR_CONFIG`` or the default."""

    env_path = Path(".env")
    if env_path.exists():
        load_dotenv(env_path)
    if config_path is None:
        config_path = os.getenv(CONFIG_ENV_VAR)
    if config_path is None:
        return CONFIG
    return load_config(Path(config_path))


def bootstrap(cfg: Config, seed: int | None = None, load_path: str | Path | None = None) -> GridSearchProblem:
    """Build the problem to search from a snapshot or the configured scenario."""

    if load_path is not None:
        problem = load_problem(load_path)
        logger.info("[Bootstrap] Loaded problem snapshot from %s", load_path)
        return problem

    if cfg.grid.map:
        scenario = MapScenario()
        problem = scenario.build(cfg.grid, cfg.search)
    else:
        rnd = Random(seed if seed is not None else cfg.grid.seed)
        scenario = RandomWallsScenario(rnd)
        problem = scenario.build(cfg.grid, cfg.search)
    logger.info("[Bootstrap] Scenario '%s' ready", scenario.get_name())
    return problem


def run_search(problem: GridSearchProblem, cfg: Config) -> SearchResult:
    engine = AStar(problem, timeout=cfg.search.timeout_seconds)
    began = time.perf_counter()
    result = engine.search()
    observer.record_search(result, time.perf_counter() - began)
    logger.info("Path is %d nodes long", len(result.path))
    logger.info("%d nodes were expanded to find the path", result.num_expanded)
    return result


async def replay_search(problem: GridSearchProblem, cfg: Config) -> SearchResult:
    """Search again on a fresh engine, drawing each step in the terminal."""

    vis = cfg.visualization
    view = TerminalView(
        problem,
        expansion_delay=vis.expansion_delay,
        path_delay=vis.path_delay,
        colour=vis.colour,
    )
    view.render()
    engine = AStar(problem, timeout=cfg.search.timeout_seconds)
    return await engine.search_visualize(view.visualize_step)


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="grid_astar", description=__doc__)
    parser.add_argument("--config", help="path to a YAML config file")
    parser.add_argument("--seed", type=int, help="seed for random walls and endpoints")
    parser.add_argument("--visualize", action="store_true", help="replay the search in the terminal")
    parser.add_argument("--load", help="load a problem snapshot instead of generating one")
    parser.add_argument("--save", help="write the problem snapshot to this path")
    parser.add_argument("--profile", type=int, metavar="N", help="profile N searches with cProfile")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    cfg = resolve_config(args.config)
    problem = bootstrap(cfg, seed=args.seed, load_path=args.load)
    print(problem.grid.to_text())

    if args.save:
        save_problem(problem, args.save)
        logger.info("[Main] Problem snapshot written to %s", args.save)

    result = run_search(problem, cfg)

    if args.visualize or cfg.visualization.enabled:
        asyncio.run(replay_search(problem, cfg))

    if args.profile:
        stats = profile_searches(
            args.profile, lambda: AStar(problem, timeout=cfg.search.timeout_seconds)
        )
        stats.sort_stats("cumulative").print_stats(10)
        logger.info("[Main] Search summary: %s", observer.summary())

    return 0 if result.path else 1


if __name__ == "__main__":
    sys.exit(main())
