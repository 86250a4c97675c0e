"""FrameClock - turns host timestamps into clamped per-frame deltas."""

import random

from skyburst.types import FrameContext


class FrameClock:
    """Variable-timestep clock.

    Timestamps are in seconds. The first timestamp seen produces a zero
    delta; afterwards the delta is clamped to ``max_dt`` so a long stall
    (a minimized window, a debugger pause) cannot blow up the physics.
    """

    def __init__(self, max_dt: float) -> None:
        if max_dt <= 0:
            raise ValueError("max_dt must be positive")
        self._max_dt = max_dt
        self._frame_number = 0
        self._elapsed = 0.0
        self._last_ts: float | None = None

    @property
    def max_dt(self) -> float:
        return self._max_dt

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def last_timestamp(self) -> float | None:
        return self._last_ts

    def delta(self, ts: float) -> float:
        if self._last_ts is None:
            self._last_ts = ts
        dt = max(0.0, ts - self._last_ts)
        self._last_ts = ts
        return min(dt, self._max_dt)

    def advance(self, dt: float) -> int:
        self._frame_number += 1
        self._elapsed += dt
        return self._frame_number

    def context(self, dt: float, rng: random.Random) -> FrameContext:
        return FrameContext(
            frame_number=self._frame_number,
            dt=dt,
            elapsed=self._elapsed,
            random=rng,
        )
