"""Build a :class:`Grid` from a plain-text map.

Map glyphs::

    %  or #   wall
    1  or S   start
    2  or G   goal
    space, .  free cell

Rows shorter than the widest row are padded with free cells. The outer ring
is always a wall, whatever the text says there, except that an endpoint on
the border is rejected.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from .cell import Coord
from .errors import MapFormatError, OutOfBoundsError
from .grid import Grid

logger = logging.getLogger(__name__)

WALL_GLYPHS = frozenset("%#")
START_GLYPHS = frozenset("1S")
GOAL_GLYPHS = frozenset("2G")
FREE_GLYPHS = frozenset(" .")


def _split_rows(text: str) -> List[str]:
    lines = text.splitlines()
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    width = max((len(line) for line in lines), default=0)
    return [line.ljust(width) for line in lines]


def parse_map(text: str) -> Grid:
    """Return a grid described by ``text``."""

    rows = _split_rows(text)
    if not rows:
        raise MapFormatError("map is empty")

    try:
        grid = Grid(len(rows), len(rows[0]))
    except ValueError as exc:
        raise MapFormatError(str(exc)) from exc

    start: Optional[Coord] = None
    goal: Optional[Coord] = None
    barriers: List[Coord] = []
    for r, line in enumerate(rows):
        for c, glyph in enumerate(line):
            coord = (r, c)
            if glyph in WALL_GLYPHS:
                if grid.in_interior(coord):
                    barriers.append(coord)
            elif glyph in START_GLYPHS:
                if start is not None:
                    raise MapFormatError(f"second start at {coord}, first at {start}")
                start = coord
            elif glyph in GOAL_GLYPHS:
                if goal is not None:
                    raise MapFormatError(f"second goal at {coord}, first at {goal}")
                goal = coord
            elif glyph not in FREE_GLYPHS:
                raise MapFormatError(f"unknown map glyph {glyph!r} at {coord}")

    if start is None:
        raise MapFormatError("map has no start cell")
    if goal is None:
        raise MapFormatError("map has no goal cell")

    try:
        grid.mark_start(start)
        grid.mark_end(goal)
    except OutOfBoundsError as exc:
        raise MapFormatError(str(exc)) from exc
    grid.mark_barriers(barriers)
    return grid


def load_map(path: str | Path) -> Grid:
    """Read ``path`` and return the grid it describes."""

    p = Path(path)
    grid = parse_map(p.read_text(encoding="utf-8"))
    logger.info("Loaded %sx%s map from %s", grid.rows, grid.cols, p)
    return grid


__all__ = ["parse_map", "load_map"]
