import pytest

from astar_grid.core.cell import Cell
from astar_grid.search.frontier import OpenSet


def _cell(cell_id: int, f: float) -> Cell:
    return Cell(id=cell_id, coord=(0, cell_id), g=0.0, h=f, f=f)


def test_push_suppresses_duplicate_ids():
    open_set = OpenSet()
    assert open_set.push(_cell(1, 3.0))
    assert not open_set.push(_cell(1, 1.0))
    assert len(open_set) == 1
    assert open_set.peek_best().f == 3.0


def test_push_stores_a_snapshot():
    open_set = OpenSet()
    cell = _cell(4, 9.0)
    open_set.push(cell)
    cell.f = 0.5
    assert open_set.peek_best().f == 9.0
    assert open_set.peek_best() is not cell


def test_contains_and_remove():
    open_set = OpenSet()
    open_set.push(_cell(1, 1.0))
    open_set.push(_cell(2, 2.0))
    assert open_set.contains(2) and 2 in open_set
    open_set.remove(2)
    assert not open_set.contains(2)
    assert open_set.ids() == {1}
    open_set.remove(99)
    assert len(open_set) == 1


def test_pop_best_returns_minimum_f():
    open_set = OpenSet()
    for cell_id, f in [(1, 5.0), (2, 2.0), (3, 4.0)]:
        open_set.push(_cell(cell_id, f))
    assert open_set.pop_best().id == 2
    assert open_set.pop_best().id == 3
    assert open_set.pop_best().id == 1
    assert not open_set


def test_ties_go_to_the_latest_entry():
    open_set = OpenSet()
    for cell_id, f in [(1, 9.0), (2, 3.0), (3, 3.0), (4, 3.0), (5, 7.0)]:
        open_set.push(_cell(cell_id, f))
    assert open_set.pop_best().id == 4
    assert open_set.pop_best().id == 3


def test_ties_keep_index_zero_when_it_is_a_minimum():
    open_set = OpenSet()
    for cell_id, f in [(1, 3.0), (2, 5.0), (3, 3.0)]:
        open_set.push(_cell(cell_id, f))
    assert open_set.best_index() == 0
    assert open_set.pop_best().id == 1


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        OpenSet().pop_best()


def test_size_tracks_distinct_ids():
    open_set = OpenSet()
    for cell_id in [1, 2, 1, 3, 2, 3, 4]:
        open_set.push(_cell(cell_id, float(cell_id)))
    assert len(open_set) == 4
    assert sorted(c.id for c in open_set) == [1, 2, 3, 4]
