"""Engine - per-frame system dispatch over a World."""

import os
import random

from skyburst.clock import FrameClock
from skyburst.types import System
from skyburst.world import World

MAX_FRAME_DT = 0.033  # s; ~30 fps floor on the simulated step


class Engine:
    def __init__(self, max_dt: float = MAX_FRAME_DT, seed: int | None = None) -> None:
        self._clock = FrameClock(max_dt)
        self._world = World()
        self._systems: list[System] = []

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def world(self) -> World:
        return self._world

    @property
    def clock(self) -> FrameClock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def random(self) -> random.Random:
        return self._rng

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def step(self, dt: float) -> None:
        if dt < 0:
            raise ValueError("dt must be non-negative")
        self._clock.advance(dt)
        ctx = self._clock.context(dt, self._rng)
        for system in self._systems:
            system(self._world, ctx)

    def frame(self, ts: float) -> float:
        """Step once for the host timestamp ``ts``; returns the delta used."""
        dt = self._clock.delta(ts)
        self.step(dt)
        return dt
