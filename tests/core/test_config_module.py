from pathlib import Path

import pytest

from astar_grid.config import (
    CONFIG,
    Config,
    DisplayConfig,
    GridConfig,
    LoggingConfig,
    SearchConfig,
    load_config,
    parse_barriers,
)


def test_config_module_loads_bundled_file():
    assert isinstance(CONFIG, Config)
    assert isinstance(CONFIG.grid, GridConfig)
    assert isinstance(CONFIG.search, SearchConfig)
    assert isinstance(CONFIG.display, DisplayConfig)
    assert isinstance(CONFIG.logging, LoggingConfig)
    assert (CONFIG.grid.rows, CONFIG.grid.cols) == (30, 45)
    assert CONFIG.grid.start == (27, 20)
    assert CONFIG.grid.goal == (3, 3)
    assert CONFIG.grid.barriers == [(16, c) for c in range(1, 39)]
    assert CONFIG.search.max_iterations == 1000


def test_missing_file_gives_demo_defaults(tmp_path: Path):
    cfg = load_config(tmp_path / "nope.yaml")
    assert cfg.grid == GridConfig()
    assert cfg.grid.barriers == [(16, c) for c in range(1, 39)]
    assert cfg.search.max_iterations == 1000
    assert cfg.search.profile_path is None
    assert cfg.display.step_rate == 100.0
    assert cfg.logging.global_level == "INFO"


def test_load_config_reads_sections(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        """
grid:
  rows: 10
  cols: 12
  start: [8, 2]
  goal: [1, 10]
  barriers:
    - [4, 4]
    - {col: 6, rows: [2, 4]}
search:
  max_iterations: 50
display:
  enabled: false
  color: false
  step_rate: 0
logging:
  global_level: debug
  module_levels:
    astar_grid.search.driver: WARNING
""",
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert (cfg.grid.rows, cfg.grid.cols) == (10, 12)
    assert cfg.grid.start == (8, 2)
    assert cfg.grid.goal == (1, 10)
    assert cfg.grid.barriers == [(4, 4), (2, 6), (3, 6), (4, 6)]
    assert cfg.search.max_iterations == 50
    assert cfg.display == DisplayConfig(enabled=False, colour=False, step_rate=0.0)
    assert cfg.logging.global_level == "DEBUG"
    assert cfg.logging.module_levels == {"astar_grid.search.driver": "WARNING"}


def test_empty_barrier_list_means_no_walls(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("grid:\n  barriers: []\n", encoding="utf-8")
    assert load_config(path).grid.barriers == []


def test_parse_barriers_segments_are_inclusive():
    assert parse_barriers([{"row": 2, "cols": [1, 3]}]) == [(2, 1), (2, 2), (2, 3)]


def test_parse_barriers_rejects_unknown_entry():
    with pytest.raises(ValueError):
        parse_barriers([{"row": 2}])


@pytest.mark.parametrize(
    "text",
    [
        "grid:\n  start: 5\n",
        "grid:\n  goal: [1]\n",
        "grid:\n  barriers: 7\n",
        "grid:\n  barriers:\n    - {row: 2, cols: 4}\n",
        "grid:\n  rows: ~\n",
        "grid: 5\n",
        "search:\n  max_iterations: lots\n",
        "logging:\n  module_levels: 7\n",
        "- grid\n- search\n",
    ],
)
def test_malformed_config_raises_value_error(tmp_path: Path, text: str):
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)
