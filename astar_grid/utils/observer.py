"""Runtime observability helpers."""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, Dict, List

# Rolling history of the last 1000 step durations in seconds
_STEP_HISTORY_LEN = 1000
_step_durations: Deque[float] = deque(maxlen=_STEP_HISTORY_LEN)

# Global in-memory list for logged events when no destination is supplied
_events: List[Dict[str, Any]] = []


def record_step(duration: float) -> None:
    """Append a step ``duration`` in seconds to the rolling history."""

    _step_durations.append(duration)


def average_step_time() -> float:
    """Return the mean recorded step duration, ``0.0`` if nothing recorded."""

    if not _step_durations:
        return 0.0
    return sum(_step_durations) / len(_step_durations)


def steps_per_second() -> float:
    avg = average_step_time()
    return 1.0 / avg if avg > 0 else 0.0


def reset() -> None:
    """Forget recorded durations and events."""

    _step_durations.clear()
    _events.clear()


def log_event(
    event_type: str,
    data: Dict[str, Any],
    log: List[Dict[str, Any]] | None = None,
) -> None:
    """Append an event dict to ``log`` or the internal event buffer."""

    event = {"type": event_type}
    event.update(data)
    if log is None:
        _events.append(event)
    else:
        log.append(event)


def summary() -> str:
    """One-line description of the recorded run."""

    if not _step_durations:
        return "steps: 0"
    return (
        f"steps: {len(_step_durations)}, "
        f"{steps_per_second():.1f} steps/s (avg {average_step_time() * 1000:.2f} ms)"
    )


__all__ = [
    "record_step",
    "average_step_time",
    "steps_per_second",
    "reset",
    "log_event",
    "summary",
    "_step_durations",
    "_events",
]
