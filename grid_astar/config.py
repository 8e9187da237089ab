"""Simple configuration loader for grid_astar."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class GridConfig:
    """Configuration values for the grid section."""

    width: int = 20
    height: int = 10
    wall_probability: float = 0.1
    seed: Optional[int] = None
    start: Optional[Tuple[int, int]] = None
    goal: Optional[Tuple[int, int]] = None
    map: Optional[List[str]] = None


@dataclass
class SearchConfig:
    """Configuration for the search engine."""

    heuristic: str = "manhattan"
    timeout_seconds: Optional[float] = None


@dataclass
class VisualizationConfig:
    """Terminal replay settings. Delays are in seconds."""

    enabled: bool = False
    expansion_delay: float = 0.0
    path_delay: float = 0.0
    colour: bool = True


@dataclass
class LoggingConfig:
    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    grid: GridConfig
    search: SearchConfig
    visualization: VisualizationConfig
    logging: LoggingConfig


def _optional_pair(value: Any) -> Optional[Tuple[int, int]]:
    if value is None:
        return None
    x, y = value
    return (int(x), int(y))


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    grid_data = data.get("grid") or {}
    seed = grid_data.get("seed")
    rows = grid_data.get("map")
    grid = GridConfig(
        width=int(grid_data.get("width", 20)),
        height=int(grid_data.get("height", 10)),
        wall_probability=float(grid_data.get("wall_probability", 0.1)),
        seed=int(seed) if seed is not None else None,
        start=_optional_pair(grid_data.get("start")),
        goal=_optional_pair(grid_data.get("goal")),
        map=[str(row) for row in rows] if rows else None,
    )

    search_data = data.get("search") or {}
    timeout = search_data.get("timeout_seconds")
    search = SearchConfig(
        heuristic=str(search_data.get("heuristic", "manhattan")),
        timeout_seconds=float(timeout) if timeout is not None else None,
    )

    vis_data = data.get("visualization") or {}
    visualization = VisualizationConfig(
        enabled=bool(vis_data.get("enabled", False)),
        expansion_delay=float(vis_data.get("expansion_delay", 0.0)),
        path_delay=float(vis_data.get("path_delay", 0.0)),
        colour=bool(vis_data.get("colour", True)),
    )

    log_data = data.get("logging") or {}
    logging_cfg = LoggingConfig(
        global_level=str(log_data.get("global_level", "INFO")).upper(),
        module_levels=dict(log_data.get("module_levels") or {}),
    )

    return Config(
        grid=grid, search=search, visualization=visualization, logging=logging_cfg
    )


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "GridConfig",
    "SearchConfig",
    "VisualizationConfig",
    "LoggingConfig",
    "load_config",
]
