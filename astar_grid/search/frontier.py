"""Open set of discovered but not yet expanded cells."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterator, List, Set

from ..core.cell import Cell


class OpenSet:
    """Unordered frontier holding cell snapshots, at most one per id.

    Snapshots are copies taken at push time; later score updates on the grid
    cell are not reflected in an entry that is already queued.
    """

    def __init__(self) -> None:
        self._items: List[Cell] = []
        self._ids: Set[int] = set()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._items)

    def contains(self, cell_id: int) -> bool:
        return cell_id in self._ids

    __contains__ = contains

    def ids(self) -> Set[int]:
        return set(self._ids)

    def push(self, cell: Cell) -> bool:
        """Queue a snapshot of ``cell``. Returns ``False`` for a duplicate id."""

        if cell.id in self._ids:
            return False
        self._items.append(replace(cell))
        self._ids.add(cell.id)
        return True

    def best_index(self) -> int:
        """Return the index of the entry to expand next.

        Starts from index 0 and scans from the last entry down, moving only on
        a strictly lower ``f``. Among equal minima the highest index wins
        unless index 0 itself holds the minimum.
        """

        if not self._items:
            raise IndexError("best_index on an empty open set")
        index = 0
        for i in range(len(self._items) - 1, -1, -1):
            if self._items[i].f < self._items[index].f:  # type: ignore[operator]
                index = i
        return index

    def peek_best(self) -> Cell:
        return self._items[self.best_index()]

    def pop_best(self) -> Cell:
        """Remove and return the minimum-``f`` snapshot."""

        cell = self._items.pop(self.best_index())
        self._ids.discard(cell.id)
        return cell

    def remove(self, cell_id: int) -> None:
        if cell_id not in self._ids:
            return
        self._items = [c for c in self._items if c.id != cell_id]
        self._ids.discard(cell_id)

    def clear(self) -> None:
        self._items.clear()
        self._ids.clear()


__all__ = ["OpenSet"]
