import math

import pytest

from astar_grid.core.cell import Cell
from astar_grid.search.scoring import STEP_COST, heuristic, score


@pytest.mark.parametrize(
    "a,b",
    [((0, 0), (3, 4)), ((27, 20), (3, 3)), ((5, 1), (1, 5)), ((2, 2), (2, 9))],
)
def test_heuristic_is_symmetric(a, b):
    assert heuristic(a, b) == heuristic(b, a)


def test_heuristic_zero_on_same_cell():
    assert heuristic((7, 11), (7, 11)) == 0


def test_heuristic_is_euclidean():
    assert heuristic((0, 0), (3, 4)) == 5.0
    assert heuristic((1, 1), (2, 2)) == pytest.approx(math.sqrt(2))


def test_heuristic_overestimates_diagonal_moves():
    # Five diagonal steps cost 5 but the estimate is 5 * sqrt(2)
    assert heuristic((0, 0), (5, 5)) > 5 * STEP_COST


def test_score_sets_g_h_f():
    cell = Cell(id=0, coord=(1, 1))
    score(cell, 2.0, (4, 5))
    assert cell.g == 2.0
    assert cell.h == 5.0
    assert cell.f == 7.0
