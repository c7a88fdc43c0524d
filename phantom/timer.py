"""A simple stopwatch."""

from __future__ import annotations

import time


class Timer:
    """Starts on creation and reports time elapsed since the last reset."""

    def __init__(self) -> None:
        self._start = 0.0
        self.reset()

    def reset(self) -> None:
        """Restart the timer from now."""
        self._start = time.perf_counter()

    def elapsed(self) -> float:
        """Seconds since the last reset."""
        return time.perf_counter() - self._start

    def elapsed_millis(self) -> float:
        """Milliseconds since the last reset."""
        return self.elapsed() * 1000.0