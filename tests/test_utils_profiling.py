from pathlib import Path
import pstats

from astar_grid.core.grid import build_grid
from astar_grid.search.driver import SearchDriver, SearchStatus
from astar_grid.utils import observer
from astar_grid.utils.profiling import profile_search


def test_profile_search_creates_dump(tmp_path: Path) -> None:
    driver = SearchDriver(build_grid(10, 10, (8, 8), (1, 1)))
    out = tmp_path / "search.prof"
    result, stats = profile_search(driver, out)

    assert out.exists()
    assert isinstance(stats, pstats.Stats)
    assert result.status is SearchStatus.GOAL_REACHED
    assert len(observer._step_durations) == result.iteration
