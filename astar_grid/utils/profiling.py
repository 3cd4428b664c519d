"""cProfile helpers for measuring search performance."""

from __future__ import annotations

import cProfile
import pstats
from pathlib import Path
import time
from typing import Any, Tuple

from .observer import record_step


def profile_search(
    driver: Any,
    out_path: str | Path = "search.prof",
) -> Tuple[Any, pstats.Stats]:
    """Run ``driver`` to completion under cProfile and dump stats to ``out_path``.

    Parameters
    ----------
    driver:
        A :class:`~astar_grid.search.driver.SearchDriver` (or anything with a
        ``step()`` returning results that expose ``is_terminal``).
    out_path:
        File to write cProfile data to.

    Returns
    -------
    tuple
        The terminal step result and the profiling statistics.
    """

    path = Path(out_path)
    profiler = cProfile.Profile()
    profiler.enable()
    last = time.perf_counter()
    while True:
        result = driver.step()
        now = time.perf_counter()
        record_step(now - last)
        last = now
        if result.is_terminal:
            break
    profiler.disable()
    profiler.dump_stats(str(path))
    return result, pstats.Stats(profiler)


__all__ = ["profile_search"]
