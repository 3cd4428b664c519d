"""Console entry point: build the configured grid and animate the search."""

from __future__ import annotations

import logging
import os
import sys
import time
from pathlib import Path
from typing import Tuple

import yaml
from dotenv import load_dotenv

from .config import CONFIG_PATH, Config, GridConfig, LoggingConfig, load_config
from .core.errors import CorruptParentChainError, GridError
from .core.grid import Grid, build_grid
from .core.map_loader import load_map
from .core.time_manager import TimeManager
from .search.driver import SearchDriver, SearchStatus, StepResult
from .utils import observer
from .utils.cli.terminal_view import TerminalView, status_lines
from .utils.profiling import profile_search

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "ASTAR_GRID_CONFIG"

EXIT_GOAL_REACHED = 0
EXIT_UNREACHABLE = 1
EXIT_ABORTED = 2
EXIT_FAULT = 3
EXIT_INTERRUPTED = 130

_EXIT_CODES = {
    SearchStatus.GOAL_REACHED: EXIT_GOAL_REACHED,
    SearchStatus.EXHAUSTED: EXIT_UNREACHABLE,
    SearchStatus.ABORTED: EXIT_ABORTED,
}

_MESSAGES = {
    SearchStatus.GOAL_REACHED: " >> End point reached. Exiting.",
    SearchStatus.EXHAUSTED: " >> End point not reachable. No solution obtained.",
    SearchStatus.ABORTED: " >> Search aborted: iteration cap reached.",
}


def configure_logging(cfg: LoggingConfig) -> None:
    """Apply the root log level and any per-module overrides from ``cfg``."""

    numeric_level = getattr(logging, cfg.global_level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )
    for module_name, level_str in cfg.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def resolve_config_path(config_path: str | Path | None = None) -> Path:
    """Pick the config file: explicit argument, then environment, then default."""

    if config_path is not None:
        return Path(config_path)
    env_value = os.getenv(CONFIG_ENV_VAR)
    if env_value:
        return Path(env_value)
    return CONFIG_PATH


def grid_from_config(cfg: GridConfig, base_dir: Path | None = None) -> Grid:
    """Build the grid described by ``cfg``; ``map_file`` wins when set."""

    if cfg.map_file:
        map_path = Path(cfg.map_file)
        if not map_path.is_absolute() and base_dir is not None:
            map_path = base_dir / map_path
        return load_map(map_path)
    return build_grid(cfg.rows, cfg.cols, cfg.start, cfg.goal, cfg.barriers)


def bootstrap(config_path: str | Path | None = None) -> Tuple[Config, SearchDriver]:
    """Load config, set up logging, then build the grid and its driver."""

    env_path = Path(".env")
    if env_path.exists():
        load_dotenv(env_path)

    actual_config_path = resolve_config_path(config_path)
    cfg = load_config(actual_config_path)
    configure_logging(cfg.logging)

    grid = grid_from_config(cfg.grid, base_dir=actual_config_path.resolve().parent)
    driver = SearchDriver(grid, max_iterations=cfg.search.max_iterations)
    logger.info(
        "[Bootstrap] %sx%s grid from %s, iteration cap %s",
        grid.rows,
        grid.cols,
        actual_config_path,
        cfg.search.max_iterations,
    )
    return cfg, driver


def run(driver: SearchDriver, view: TerminalView, tm: TimeManager) -> StepResult:
    """Step ``driver`` to a terminal state, redrawing after every step."""

    last = time.perf_counter()
    while True:
        result = driver.step()
        now = time.perf_counter()
        observer.record_step(now - last)
        view.render(driver.grid, status_lines(result))
        if result.is_terminal:
            break
        tm.sleep_until_next_step()
        last = time.perf_counter()

    observer.log_event(
        "search_finished",
        {
            "status": result.status.value,
            "iterations": result.iteration,
            "path_len": len(result.path) - 1 if result.path else 0,
        },
    )
    return result


def exit_code_for(result: StepResult) -> int:
    return _EXIT_CODES.get(result.status, EXIT_FAULT)


def main(config_path: str | Path | None = None) -> int:
    """Run the configured search and return the process exit code.

    0 goal reached, 1 unreachable, 2 iteration cap hit, 3 bad setup or
    internal fault, 130 stopped with Ctrl-C.
    """

    try:
        cfg, driver = bootstrap(config_path)
    except (GridError, ValueError, OSError, yaml.YAMLError) as exc:
        logging.basicConfig(level=logging.INFO)
        logger.error("Could not set up the search: %s", exc)
        return EXIT_FAULT

    print(" ---- A* Test ----- ")

    try:
        if cfg.search.profile_path:
            result, stats = profile_search(driver, cfg.search.profile_path)
            stats.sort_stats("cumulative").print_stats(10)
            logger.info("Profile written to %s", cfg.search.profile_path)
        else:
            view = TerminalView(enabled=cfg.display.enabled, colour=cfg.display.colour)
            tm = TimeManager(cfg.display.step_rate)
            result = run(driver, view, tm)
    except CorruptParentChainError as exc:
        logger.critical("Internal fault while rebuilding the path: %s", exc)
        return EXIT_FAULT
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt caught. Stopping search.")
        return EXIT_INTERRUPTED

    print(_MESSAGES[result.status])
    if result.path:
        print(f" >> Path of {len(result.path) - 1} steps: {result.path}")
    logger.info("Run summary: %s", observer.summary())
    return exit_code_for(result)


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
