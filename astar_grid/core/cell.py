"""Cell record stored at every grid position."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


Coord = Tuple[int, int]  # (row, col)


class CellKind(Enum):
    """Display category of a cell. Only ``BLOCKED`` matters to the search."""

    FREE = "free"
    BLOCKED = "blocked"
    START = "start"
    END = "end"
    PATH = "path"
    FRONTIER = "frontier"
    EXPLORED = "explored"


@dataclass
class Cell:
    """One grid position plus its search bookkeeping."""

    id: int
    coord: Coord
    kind: CellKind = CellKind.FREE
    parent_id: Optional[int] = None
    g: Optional[float] = None
    h: Optional[float] = None
    f: Optional[float] = None
    is_start: bool = False

    @property
    def discovered(self) -> bool:
        return self.g is not None

    @property
    def passable(self) -> bool:
        return self.kind is not CellKind.BLOCKED

    def clear_scores(self) -> None:
        self.parent_id = None
        self.g = None
        self.h = None
        self.f = None


__all__ = ["Cell", "CellKind", "Coord"]
