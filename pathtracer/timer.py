"""Wall-clock timing of program stages."""

from __future__ import annotations

import math
import time
from typing import Optional

SECONDS = 1.0
MILLISECONDS = 0.001
MINUTES = 60.0


class Timer:
    """Starts on creation and reports whole elapsed units once stopped."""

    def __init__(self, unit_seconds: float) -> None:
        if unit_seconds <= 0:
            raise ValueError("unit_seconds must be positive")
        self.unit_seconds = unit_seconds
        self._start = time.monotonic()
        self._end: Optional[float] = None

    def stop(self) -> None:
        """Record the end time."""
        self._end = time.monotonic()

    def elapsed(self) -> float:
        """Whole units between start and stop, truncated toward zero."""
        if self._end is None:
            raise RuntimeError("timer has not been stopped")
        return float(math.trunc((self._end - self._start) / self.unit_seconds))


def format_context(context_name: str, time_unit: str, duration: float) -> str:
    """The log line for one timed stage."""
    return f"System - {context_name} - duration: {duration:g}{time_unit}"


def log_context(context_name: str, time_unit: str, duration: float) -> None:
    """Print the log line for one timed stage."""
    print(format_context(context_name, time_unit, duration))