"""Simple stopwatch that logs elapsed microseconds between laps."""

from __future__ import annotations

import os
import sys
import time

from . import log


class Stopwatch:
    """Measures time between consecutive laps."""

    def __init__(self):
        self._stamp = 0
        self.reset()

    def reset(self):
        """Start measuring from now."""
        self._stamp = time.perf_counter_ns()

    def lap(self, label):
        """Log and return microseconds since the last lap or reset, then restart."""
        now = time.perf_counter_ns()
        elapsed = (now - self._stamp) // 1000
        self._stamp = now
        log.info(
            os.path.basename(__file__),
            sys._getframe().f_lineno,
            "%s time is %d us",
            label,
            elapsed,
        )
        return elapsed