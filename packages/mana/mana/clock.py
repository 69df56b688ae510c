"""Simulated tick counter and wall-clock pacing for the mana loop."""
from __future__ import annotations

import time
from typing import Callable

from mana.types import TICKS_PER_SECOND, TickContext

# Simulated seconds per tick. Regeneration rates are per simulated second.
STEP = 1.0 / TICKS_PER_SECOND


class Clock:
    """Counts ticks and paces them against wall time.

    Simulated time always advances by ``STEP`` per tick; *tps* only sets how
    many ticks ``wait`` lets through per wall-clock second. A server paced
    faster or slower than 20 tps therefore regenerates faster or slower in
    wall time, but identically per tick.
    """

    def __init__(self, tps: int = TICKS_PER_SECOND) -> None:
        if tps <= 0:
            raise ValueError(f"tps must be positive, got {tps}")
        self._tps = tps
        self._period = 1.0 / tps
        self._tick_number = 0
        self._tick_started: float | None = None

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def period(self) -> float:
        """Wall-clock seconds budgeted per tick."""
        return self._period

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed(self) -> float:
        """Simulated seconds since tick 0."""
        return self._tick_number / TICKS_PER_SECOND

    def advance(self) -> int:
        self._tick_started = time.monotonic()
        self._tick_number += 1
        return self._tick_number

    def wait(self) -> float:
        """Sleep out the rest of the current tick's period. Returns seconds slept."""
        if self._tick_started is None:
            return 0.0
        remaining = self._period - (time.monotonic() - self._tick_started)
        if remaining <= 0:
            return 0.0
        time.sleep(remaining)
        return remaining

    def context(self, stop_fn: Callable[[], None]) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=STEP,
            elapsed=self.elapsed,
            request_stop=stop_fn,
        )

    @staticmethod
    def ticks_for(seconds: float) -> int:
        """Whole ticks covering *seconds* of simulated time; 0 for <= 0."""
        if seconds <= 0:
            return 0
        return max(1, round(seconds * TICKS_PER_SECOND))

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number
        self._tick_started = None
