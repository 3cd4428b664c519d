"""Walk parent links back from the goal."""

from __future__ import annotations

from typing import List

from ..core.cell import Cell
from ..core.errors import CorruptParentChainError, OutOfBoundsError
from ..core.grid import Grid


def reconstruct_path(grid: Grid, goal_id: int) -> List[Cell]:
    """Return the cells from the goal back to the start, goal first.

    Raises :class:`CorruptParentChainError` when a parent is missing or the
    chain is longer than the grid has cells.
    """

    current = grid.cell_by_id(goal_id)
    path: List[Cell] = [current]
    while not current.is_start:
        if len(path) > grid.size:
            raise CorruptParentChainError(
                f"parent chain from cell {goal_id} exceeds {grid.size} cells"
            )
        if current.parent_id is None:
            raise CorruptParentChainError(
                f"cell {current.id} at {current.coord} has no parent"
            )
        try:
            current = grid.cell_by_id(current.parent_id)
        except OutOfBoundsError as exc:
            raise CorruptParentChainError(str(exc)) from exc
        path.append(current)
    return path


__all__ = ["reconstruct_path"]
