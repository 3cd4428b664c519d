"""search package."""

from .driver import SearchDriver, SearchStatus, StepResult, search
from .frontier import OpenSet
from .reconstruct import reconstruct_path
from .scoring import STEP_COST, heuristic

__all__ = [
    "OpenSet",
    "STEP_COST",
    "SearchDriver",
    "SearchStatus",
    "StepResult",
    "heuristic",
    "reconstruct_path",
    "search",
]
