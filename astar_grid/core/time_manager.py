"""Step pacing helpers."""

from __future__ import annotations

import time


class TimeManager:
    """Manage the delay between search steps.

    A ``step_rate`` of zero or less disables pacing entirely.
    """

    def __init__(self, step_rate: float = 100.0) -> None:
        self.step_rate: float = step_rate
        self.step_counter: int = 0
        self._last_step: float = time.perf_counter()

    # ------------------------------------------------------------------
    # Timing
    # ------------------------------------------------------------------
    def sleep_until_next_step(self) -> None:
        """Block until the next step should occur."""

        self.step_counter += 1
        if self.step_rate <= 0:
            self._last_step = time.perf_counter()
            return

        interval = 1.0 / self.step_rate
        target = self._last_step + interval
        now = time.perf_counter()
        remaining = target - now
        if remaining > 0:
            time.sleep(remaining)
            self._last_step = target
        else:
            # Behind schedule; restart from the current time
            self._last_step = now


__all__ = ["TimeManager"]
