"""Simple configuration loader for astar_grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"

Coord = Tuple[int, int]


def _default_barriers() -> List[Coord]:
    # Demo wall across row 16 with a gap on the right-hand side.
    return [(16, c) for c in range(1, 39)]


@dataclass
class GridConfig:
    """Grid layout: size, endpoints and interior walls."""

    rows: int = 30
    cols: int = 45
    start: Coord = (27, 20)
    goal: Coord = (3, 3)
    barriers: List[Coord] = field(default_factory=_default_barriers)
    map_file: Optional[str] = None


@dataclass
class SearchConfig:
    """Search limits."""

    max_iterations: int = 1000
    profile_path: Optional[str] = None


@dataclass
class DisplayConfig:
    """Terminal rendering options."""

    enabled: bool = True
    colour: bool = True
    step_rate: float = 100.0


@dataclass
class LoggingConfig:
    """Root log level and per-module overrides."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    grid: GridConfig = field(default_factory=GridConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _coerce(convert: Callable[[Any], Any], value: Any, what: str) -> Any:
    try:
        return convert(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Bad {what} in config: {value!r}") from exc


def _coord(value: Any) -> Coord:
    try:
        row, col = value
        return (int(row), int(col))
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Bad coordinate in config: {value!r}") from exc


def _inclusive(span: Any) -> range:
    try:
        first, last = span
        return range(int(first), int(last) + 1)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Bad segment bounds in config: {span!r}") from exc


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"Config section '{name}' must be a mapping, got {section!r}")
    return section


def parse_barriers(entries: List[Any]) -> List[Coord]:
    """Expand barrier entries into a list of coordinates.

    An entry is either a ``[row, col]`` point, a horizontal segment
    ``{"row": r, "cols": [first, last]}`` or a vertical segment
    ``{"col": c, "rows": [first, last]}``. Segment bounds are inclusive.
    """

    if not isinstance(entries, list):
        raise ValueError(f"barriers must be a list, got {entries!r}")
    coords: List[Coord] = []
    for entry in entries:
        if isinstance(entry, dict):
            if "row" in entry and "cols" in entry:
                row = _coerce(int, entry["row"], "barrier row")
                coords.extend((row, c) for c in _inclusive(entry["cols"]))
            elif "col" in entry and "rows" in entry:
                col = _coerce(int, entry["col"], "barrier col")
                coords.extend((r, col) for r in _inclusive(entry["rows"]))
            else:
                raise ValueError(f"Unrecognised barrier entry: {entry!r}")
        else:
            coords.append(_coord(entry))
    return coords


def _parse_config(data: Any) -> Config:
    """Convert raw ``data`` into :class:`Config`.

    Raises ``ValueError`` when a section or value has the wrong shape.
    """

    if not isinstance(data, dict):
        raise ValueError(f"Config must be a mapping, got {type(data).__name__}")

    grid_data = _section(data, "grid")
    default_grid = GridConfig()
    grid = GridConfig(
        rows=_coerce(int, grid_data.get("rows", default_grid.rows), "grid.rows"),
        cols=_coerce(int, grid_data.get("cols", default_grid.cols), "grid.cols"),
        start=_coord(grid_data.get("start", default_grid.start)),
        goal=_coord(grid_data.get("goal", default_grid.goal)),
        barriers=(
            parse_barriers(grid_data["barriers"] or [])
            if "barriers" in grid_data
            else default_grid.barriers
        ),
        map_file=grid_data.get("map_file"),
    )

    search_data = _section(data, "search")
    search = SearchConfig(
        max_iterations=_coerce(
            int, search_data.get("max_iterations", 1000), "search.max_iterations"
        ),
        profile_path=search_data.get("profile_path"),
    )

    display_data = _section(data, "display")
    display = DisplayConfig(
        enabled=bool(display_data.get("enabled", True)),
        colour=bool(display_data.get("colour", display_data.get("color", True))),
        step_rate=_coerce(float, display_data.get("step_rate", 100.0), "display.step_rate"),
    )

    logging_data = _section(data, "logging")
    logging_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=_coerce(
            dict, logging_data.get("module_levels") or {}, "logging.module_levels"
        ),
    )

    return Config(grid=grid, search=search, display=display, logging=logging_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
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
    "DisplayConfig",
    "LoggingConfig",
    "load_config",
    "parse_barriers",
]
