import time
import pytest

from astar_grid.core.time_manager import TimeManager


def test_sleep_increments_counter():
    tm = TimeManager(step_rate=50.0)
    start = time.perf_counter()
    tm.sleep_until_next_step()
    elapsed = time.perf_counter() - start

    assert tm.step_counter == 1
    # Expect roughly 20ms sleep; allow generous tolerance
    assert elapsed == pytest.approx(0.02, abs=0.01)


def test_zero_rate_does_not_sleep(monkeypatch):
    calls: list[float] = []
    monkeypatch.setattr(time, "sleep", lambda s: calls.append(s))
    tm = TimeManager(step_rate=0)
    for _ in range(3):
        tm.sleep_until_next_step()
    assert tm.step_counter == 3
    assert calls == []
