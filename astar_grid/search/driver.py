"""Step-wise A* search over a :class:`~astar_grid.core.grid.Grid`.

Each call to :meth:`SearchDriver.step` performs one expansion so a renderer
can redraw between steps::

    driver = SearchDriver(grid)
    result = driver.step()
    while not result.is_terminal:
        result = driver.step()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Set

from ..core.cell import CellKind, Coord
from ..core.grid import Grid
from .frontier import OpenSet
from .reconstruct import reconstruct_path
from .scoring import STEP_COST, score

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITERATIONS = 1000


class SearchStatus(Enum):
    RUNNING = "running"
    GOAL_REACHED = "goal_reached"
    EXHAUSTED = "exhausted"
    ABORTED = "aborted"


@dataclass
class StepResult:
    """Outcome of one search step."""

    status: SearchStatus
    iteration: int
    current: Optional[Coord] = None
    opened: List[Coord] = field(default_factory=list)
    path: Optional[List[Coord]] = None  # start -> goal, GOAL_REACHED only
    open_size: int = 0
    closed_count: int = 0

    @property
    def is_terminal(self) -> bool:
        return self.status is not SearchStatus.RUNNING


class SearchDriver:
    """Run A* one expansion at a time, mutating ``grid`` in place."""

    def __init__(self, grid: Grid, max_iterations: int = DEFAULT_MAX_ITERATIONS) -> None:
        if grid.start is None or grid.goal is None:
            raise ValueError("grid needs both a start and a goal before searching")
        if max_iterations < 0:
            raise ValueError("max_iterations must not be negative")
        self.grid = grid
        self.max_iterations = max_iterations
        self.open_set = OpenSet()
        self.closed_set: Set[int] = set()
        self.iterations: int = 0
        self._final: Optional[StepResult] = None
        self.reset()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    @property
    def start_id(self) -> int:
        return self.grid.get(self.grid.start).id  # type: ignore[arg-type]

    @property
    def goal_id(self) -> int:
        return self.grid.get(self.grid.goal).id  # type: ignore[arg-type]

    @property
    def status(self) -> SearchStatus:
        return self._final.status if self._final else SearchStatus.RUNNING

    def reset(self) -> None:
        """Clear all search state and seed the open set with the start cell."""

        self.grid.reset_search_state()
        self.open_set.clear()
        self.closed_set.clear()
        self.iterations = 0
        self._final = None

        start = self.grid.get(self.grid.start)  # type: ignore[arg-type]
        score(start, 0.0, self.grid.goal)  # type: ignore[arg-type]
        self.open_set.push(start)
        logger.info(
            "Search started: start=%s goal=%s max_iterations=%s",
            self.grid.start,
            self.grid.goal,
            self.max_iterations,
        )

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------
    def _result(self, status: SearchStatus, **kwargs) -> StepResult:
        return StepResult(
            status=status,
            iteration=self.iterations,
            open_size=len(self.open_set),
            closed_count=len(self.closed_set),
            **kwargs,
        )

    def _finish(self, result: StepResult) -> StepResult:
        self._final = result
        logger.info(
            "Search finished: %s after %s iterations (%s expanded)",
            result.status.value,
            result.iteration,
            result.closed_count,
        )
        return result

    def step(self) -> StepResult:
        """Perform one iteration and return its outcome.

        Once a terminal status is reached the same result is returned on
        every further call.
        """

        if self._final is not None:
            return self._final

        if self.iterations >= self.max_iterations:
            logger.warning("Iteration cap of %s reached", self.max_iterations)
            return self._finish(self._result(SearchStatus.ABORTED))

        self.iterations += 1

        if not self.open_set:
            return self._finish(self._result(SearchStatus.EXHAUSTED))

        current = self.open_set.peek_best()

        if current.id == self.goal_id:
            cells = reconstruct_path(self.grid, current.id)
            cells.reverse()
            for cell in cells:
                if cell.kind not in (CellKind.START, CellKind.END):
                    cell.kind = CellKind.PATH
            path = [cell.coord for cell in cells]
            return self._finish(
                self._result(SearchStatus.GOAL_REACHED, current=current.coord, path=path)
            )

        self.open_set.remove(current.id)
        self.closed_set.add(current.id)
        if current.id not in (self.start_id, self.goal_id):
            self.grid.set_kind(current.coord, CellKind.EXPLORED)

        goal = self.grid.goal
        opened: List[Coord] = []
        for nc in self.grid.neighbors(current.coord):
            n = self.grid.get(nc)
            tentative_g = current.g + STEP_COST  # type: ignore[operator]
            if not n.discovered or tentative_g < n.g:  # type: ignore[operator]
                score(n, tentative_g, goal)  # type: ignore[arg-type]
                n.parent_id = current.id
                if self.open_set.push(n):
                    opened.append(nc)
                    if n.kind is CellKind.FREE:
                        n.kind = CellKind.FRONTIER

        logger.debug(
            "Step %s: expanded %s f=%.3f, opened %s, open set %s",
            self.iterations,
            current.coord,
            current.f,
            len(opened),
            len(self.open_set),
        )
        return self._result(SearchStatus.RUNNING, current=current.coord, opened=opened)

    def run(self, on_step: Optional[Callable[[StepResult], None]] = None) -> StepResult:
        """Step until a terminal status, calling ``on_step`` after every step."""

        result = self.step()
        if on_step is not None:
            on_step(result)
        while not result.is_terminal:
            result = self.step()
            if on_step is not None:
                on_step(result)
        return result


def search(grid: Grid, max_iterations: int = DEFAULT_MAX_ITERATIONS) -> StepResult:
    """Search ``grid`` to completion and return the terminal result."""

    return SearchDriver(grid, max_iterations).run()


__all__ = [
    "DEFAULT_MAX_ITERATIONS",
    "SearchDriver",
    "SearchStatus",
    "StepResult",
    "search",
]
