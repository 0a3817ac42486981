"""Fixed-timestep clock with millisecond to tick conversion."""

import math


class Clock:
    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._tick_number = 0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def ticks_for(self, ms: float) -> int:
        """Whole ticks covering ``ms`` milliseconds, rounded up, never below 1."""
        if ms < 0:
            raise ValueError("ms must be non-negative")
        return max(1, math.ceil(ms * self._tps / 1000))


class Cadence:
    """Counts fixed-millisecond intervals elapsed across ticks of any rate.

    Time is kept in units of ms * tps so one tick is exactly 1000 units and
    no rounding accumulates.
    """

    def __init__(self, interval_ms: int, tps: int) -> None:
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        self._threshold = interval_ms * tps
        self._budget = 0

    def tick(self) -> int:
        """Advance one tick. Returns how many intervals completed."""
        self._budget += 1000
        count, self._budget = divmod(self._budget, self._threshold)
        return count
