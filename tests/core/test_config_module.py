from pathlib import Path

import pytest
import yaml

from grid_astar.config import (
    CONFIG,
    CONFIG_PATH,
    GridConfig,
    LoggingConfig,
    SearchConfig,
    VisualizationConfig,
    load_config,
)


def test_config_module_loads_config():
    assert isinstance(CONFIG.grid, GridConfig)
    assert isinstance(CONFIG.search, SearchConfig)
    assert isinstance(CONFIG.visualization, VisualizationConfig)
    assert isinstance(CONFIG.logging, LoggingConfig)
    assert CONFIG.search.heuristic == "manhattan"
    assert CONFIG.logging.global_level == "INFO"


def test_config_file_keys():
    data = yaml.safe_load(CONFIG_PATH.read_text())
    assert data["grid"]["width"] == 20
    assert data["grid"]["height"] == 10
    assert data["search"]["heuristic"] == "manhattan"


def test_missing_file_uses_defaults(tmp_path: Path):
    cfg = load_config(tmp_path / "nope.yaml")
    assert cfg.grid == GridConfig()
    assert cfg.search.timeout_seconds is None
    assert cfg.visualization.enabled is False
    assert cfg.logging.module_levels == {}


def test_custom_values_are_parsed(tmp_path: Path):
    path = tmp_path / "custom.yaml"
    path.write_text(
        "grid:\n"
        "  width: 5\n"
        "  height: 4\n"
        "  seed: 7\n"
        "  start: [0, 1]\n"
        "  goal: [4, 3]\n"
        "  map: ['.....', '.#...', '.....', '...#.']\n"
        "search:\n"
        "  heuristic: euclidean\n"
        "  timeout_seconds: 2\n"
        "logging:\n"
        "  global_level: debug\n"
    )
    cfg = load_config(path)
    assert (cfg.grid.width, cfg.grid.height, cfg.grid.seed) == (5, 4, 7)
    assert cfg.grid.start == (0, 1)
    assert cfg.grid.goal == (4, 3)
    assert cfg.grid.map[1] == ".#..."
    assert cfg.search.heuristic == "euclidean"
    assert cfg.search.timeout_seconds == 2.0
    assert cfg.logging.global_level == "DEBUG"


def test_malformed_yaml_propagates(tmp_path: Path):
    path = tmp_path / "bad.yaml"
    path.write_text("grid: [unclosed\n")
    with pytest.raises(yaml.YAMLError):
        load_config(path)
