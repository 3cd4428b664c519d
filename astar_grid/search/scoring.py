"""Cost and heuristic helpers for the grid search."""

from __future__ import annotations

import math

from ..core.cell import Cell, Coord


# Orthogonal and diagonal moves cost the same.
STEP_COST = 1.0


def heuristic(a: Coord, b: Coord) -> float:
    """Return the straight-line distance between two coordinates.

    With unit-cost diagonal moves this can overestimate the remaining cost,
    so the search is not guaranteed to find an optimal path.
    """

    return math.sqrt((a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2)


def score(cell: Cell, g: float, goal: Coord) -> None:
    """Set ``g`` on ``cell`` and recompute its ``h`` and ``f``."""

    cell.g = g
    cell.h = heuristic(cell.coord, goal)
    cell.f = cell.g + cell.h


__all__ = ["STEP_COST", "heuristic", "score"]
