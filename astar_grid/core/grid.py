"""Fixed-size grid of cells with a walled border."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional

from .cell import Cell, CellKind, Coord
from .errors import OutOfBoundsError

logger = logging.getLogger(__name__)


# Moore neighbourhood offsets. The order decides push order into the open set
# and therefore which of several equal-f cells gets expanded first.
NEIGHBOUR_OFFSETS: tuple[Coord, ...] = (
    (-1, -1),
    (1, -1),
    (-1, 1),
    (1, 1),
    (0, -1),
    (0, 1),
    (-1, 0),
    (1, 0),
)

# Kinds that only exist to visualise a search and are dropped on reset.
_SEARCH_KINDS = {CellKind.PATH, CellKind.FRONTIER, CellKind.EXPLORED}

MIN_SIZE = 3


class Grid:
    """Owns every :class:`Cell` of a ``rows`` x ``cols`` map.

    Border cells are walls. Cell ids are assigned row-major, so an id maps
    back to its coordinate without a lookup table.
    """

    def __init__(self, rows: int, cols: int) -> None:
        if rows < MIN_SIZE or cols < MIN_SIZE:
            raise ValueError(
                f"grid must be at least {MIN_SIZE}x{MIN_SIZE}, got {rows}x{cols}"
            )
        self.rows: int = rows
        self.cols: int = cols
        self.start: Optional[Coord] = None
        self.goal: Optional[Coord] = None
        self._cells: List[List[Cell]] = []
        for r in range(rows):
            row: List[Cell] = []
            for c in range(cols):
                kind = CellKind.BLOCKED if self.on_border((r, c)) else CellKind.FREE
                row.append(Cell(id=r * cols + c, coord=(r, c), kind=kind))
            self._cells.append(row)

    @classmethod
    def build(cls, rows: int, cols: int) -> "Grid":
        return cls(rows, cols)

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    @property
    def size(self) -> int:
        """Total number of cells."""
        return self.rows * self.cols

    def in_bounds(self, coord: Coord) -> bool:
        r, c = coord
        return 0 <= r < self.rows and 0 <= c < self.cols

    def on_border(self, coord: Coord) -> bool:
        r, c = coord
        return r == 0 or c == 0 or r == self.rows - 1 or c == self.cols - 1

    def in_interior(self, coord: Coord) -> bool:
        return self.in_bounds(coord) and not self.on_border(coord)

    def _require_interior(self, coord: Coord, what: str) -> None:
        if not self.in_interior(coord):
            raise OutOfBoundsError(
                f"{what} {coord} is outside the open interior of a "
                f"{self.rows}x{self.cols} grid"
            )

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def get(self, coord: Coord) -> Cell:
        """Return the cell at ``coord``."""
        if not self.in_bounds(coord):
            raise OutOfBoundsError(f"{coord} is outside a {self.rows}x{self.cols} grid")
        r, c = coord
        return self._cells[r][c]

    def coord_of(self, cell_id: int) -> Coord:
        if not 0 <= cell_id < self.size:
            raise OutOfBoundsError(f"no cell with id {cell_id}")
        return divmod(cell_id, self.cols)

    def cell_by_id(self, cell_id: int) -> Cell:
        return self.get(self.coord_of(cell_id))

    def set_kind(self, coord: Coord, kind: CellKind) -> None:
        self.get(coord).kind = kind

    def __iter__(self) -> Iterator[Cell]:
        for row in self._cells:
            yield from row

    def kinds(self) -> List[List[CellKind]]:
        """Return a copy of every cell's kind, indexed ``[row][col]``."""
        return [[cell.kind for cell in row] for row in self._cells]

    # ------------------------------------------------------------------
    # Neighbourhood
    # ------------------------------------------------------------------
    def neighbors(self, coord: Coord) -> List[Coord]:
        """Return the passable 8-connected neighbours of ``coord``."""
        r, c = coord
        out: List[Coord] = []
        for dr, dc in NEIGHBOUR_OFFSETS:
            n = (r + dr, c + dc)
            if not self.in_bounds(n):
                continue
            if not self._cells[n[0]][n[1]].passable:
                continue
            out.append(n)
        return out

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------
    def mark_start(self, coord: Coord) -> None:
        """Place the unique start cell at ``coord``."""
        self._require_interior(coord, "start")
        cell = self.get(coord)
        if cell.kind is CellKind.BLOCKED:
            raise ValueError(f"start {coord} is on a barrier")
        if coord == self.goal:
            raise ValueError(f"start {coord} coincides with the goal")
        if self.start is not None:
            previous = self.get(self.start)
            previous.kind = CellKind.FREE
            previous.is_start = False
        cell.kind = CellKind.START
        cell.is_start = True
        self.start = coord

    def mark_end(self, coord: Coord) -> None:
        """Place the goal cell at ``coord``."""
        self._require_interior(coord, "goal")
        cell = self.get(coord)
        if cell.kind is CellKind.BLOCKED:
            raise ValueError(f"goal {coord} is on a barrier")
        if coord == self.start:
            raise ValueError(f"goal {coord} coincides with the start")
        if self.goal is not None:
            self.get(self.goal).kind = CellKind.FREE
        cell.kind = CellKind.END
        self.goal = coord

    def mark_barrier(self, coord: Coord) -> None:
        """Turn the interior cell at ``coord`` into a wall."""
        self._require_interior(coord, "barrier")
        if coord in (self.start, self.goal):
            raise ValueError(f"barrier {coord} would overwrite an endpoint")
        self.get(coord).kind = CellKind.BLOCKED

    def mark_barriers(self, coords: Iterable[Coord]) -> None:
        for coord in coords:
            self.mark_barrier(coord)

    def reset_search_state(self) -> None:
        """Forget scores and search markings so the grid can be searched again."""
        for cell in self:
            cell.clear_scores()
            if cell.kind in _SEARCH_KINDS:
                cell.kind = CellKind.FREE


def build_grid(
    rows: int,
    cols: int,
    start: Coord,
    goal: Coord,
    barriers: Iterable[Coord] = (),
) -> Grid:
    """Return a walled grid with endpoints and interior barriers placed."""

    grid = Grid(rows, cols)
    grid.mark_start(tuple(start))  # type: ignore[arg-type]
    grid.mark_end(tuple(goal))  # type: ignore[arg-type]
    barrier_list = [tuple(b) for b in barriers]
    grid.mark_barriers(barrier_list)  # type: ignore[arg-type]
    logger.debug(
        "Built %sx%s grid, start=%s goal=%s, %s barrier cells",
        rows,
        cols,
        grid.start,
        grid.goal,
        len(barrier_list),
    )
    return grid


__all__ = ["Grid", "build_grid", "NEIGHBOUR_OFFSETS"]
