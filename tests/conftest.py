# tests/conftest.py
import pytest

from astar_grid.core.grid import build_grid
from astar_grid.utils import observer


DEMO_ROWS, DEMO_COLS = 30, 45
DEMO_START, DEMO_GOAL = (27, 20), (3, 3)


def wall_row(row: int, first: int, last: int) -> list[tuple[int, int]]:
    return [(row, c) for c in range(first, last + 1)]


@pytest.fixture
def demo_grid():
    """The 30x45 demo layout: wall on row 16 with a gap at columns 39..43."""
    return build_grid(DEMO_ROWS, DEMO_COLS, DEMO_START, DEMO_GOAL, wall_row(16, 1, 38))


@pytest.fixture
def sealed_grid():
    """Same layout but the wall spans the whole interior width."""
    return build_grid(DEMO_ROWS, DEMO_COLS, DEMO_START, DEMO_GOAL, wall_row(16, 1, 43))


@pytest.fixture
def open_grid():
    return build_grid(12, 12, (9, 9), (2, 2))


@pytest.fixture(autouse=True)
def _clean_observer():
    observer.reset()
    yield
    observer.reset()
