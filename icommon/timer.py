"""An interval timer cross-checked against a second clock."""

from __future__ import annotations

import time
from typing import Callable

_MAX_DISAGREEMENT = 1.0


class Timer:
    """Measures elapsed seconds with a fine clock, falling back to a reference clock.

    If the two clocks disagree by more than a second the fine clock is assumed
    faulty and the reference reading is returned.
    """

    inaccurate_count = 0

    def __init__(
        self,
        clock: Callable[[], float] = time.perf_counter,
        reference: Callable[[], float] = time.monotonic,
    ) -> None:
        self._clock = clock
        self._reference = reference
        self.start()

    def start(self) -> None:
        self._clock_base = self._clock()
        self._reference_base = self._reference()

    def elapsed_time(self) -> float:
        """Seconds since the last start()."""
        clock_seconds = self._clock() - self._clock_base
        reference_seconds = self._reference() - self._reference_base
        if abs(clock_seconds - reference_seconds) > _MAX_DISAGREEMENT:
            Timer.inaccurate_count += 1
            return reference_seconds
        return clock_seconds