"""Rocket that climbs, bursts into sparks, and burns out.

A Firework moves through three states::

    ASCENDING --(target height or apex reached)--> EXPLODED
    EXPLODED  --(every owned particle expired)---> DEAD

While ascending it sheds short-lived trail particles. ``explode`` is the
entry action of EXPLODED and fills ``sparks`` with the burst.
"""
from __future__ import annotations

import math
import random
from enum import Enum

from skyburst_physics import Body, integrate, vec

from skyburst_pyro.color import HSLA, random_vivid
from skyburst_pyro.particle import Particle, spawn_particle
from skyburst_pyro.rng import pick, rand, randint
from skyburst_pyro.surface import Blend, Surface

LAUNCH_SPEED = (320.0, 520.0)
LAUNCH_DRIFT = (-30.0, 30.0)
THRUST_DECAY = 20.0  # px/s^2 pulling the rocket back toward zero upward speed
APEX_SPEED = -60.0
ROCKET_RADIUS = 2.2

TRAIL_CHANCE = 0.6
TRAIL_OFFSET = 6.0
TRAIL_VX = (-30.0, 30.0)
TRAIL_VY = (20.0, 60.0)
TRAIL_LIFETIME = (0.25, 0.45)
TRAIL_SIZE = (1.2, 2.2)

BURST_COUNT = (60, 120)
BURST_SPEED = (120.0, 360.0)
BURST_LIFETIME = (0.8, 1.8)
BURST_SIZE = (1.2, 3.2)
BURST_DRAG = (0.985, 0.998)
BURST_GRAVITY = (60.0, 140.0)
PALETTE_EXTRA = 3


class FireworkState(Enum):
    ASCENDING = "ascending"
    EXPLODED = "exploded"
    DEAD = "dead"


class Firework:
    def __init__(
        self,
        x: float,
        ground_y: float,
        target_y: float,
        color: HSLA | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.body = Body(
            position=(x, ground_y),
            velocity=(rand(self._rng, *LAUNCH_DRIFT), -rand(self._rng, *LAUNCH_SPEED)),
            gravity=THRUST_DECAY,
        )
        self.color = color if color is not None else random_vivid(self._rng)
        self.target_y = target_y
        self.state = FireworkState.ASCENDING
        self.trail: list[Particle] = []
        self.sparks: list[Particle] = []

    @property
    def exploded(self) -> bool:
        return self.state is not FireworkState.ASCENDING

    @property
    def dead(self) -> bool:
        return self.state is FireworkState.DEAD

    @property
    def particles(self) -> list[Particle]:
        return self.trail + self.sparks

    def update(self, dt: float) -> None:
        if self.state is FireworkState.ASCENDING:
            self._ascend(dt)
        elif self.state is FireworkState.EXPLODED:
            self._burn(dt)

    def _ascend(self, dt: float) -> None:
        integrate(self.body, dt)

        x, y = self.body.position
        if self._rng.random() < TRAIL_CHANCE:
            self.trail.append(spawn_particle(
                self._rng,
                x,
                y + TRAIL_OFFSET,
                rand(self._rng, *TRAIL_VX),
                rand(self._rng, *TRAIL_VY),
                rand(self._rng, *TRAIL_LIFETIME),
                self.color,
                rand(self._rng, *TRAIL_SIZE),
            ))

        if y <= self.target_y or self.body.velocity[1] >= APEX_SPEED:
            self.explode()

    def _burn(self, dt: float) -> None:
        self.trail = _advance(self.trail, dt)
        self.sparks = _advance(self.sparks, dt)
        if not self.trail and not self.sparks:
            self.state = FireworkState.DEAD

    def explode(self) -> None:
        if self.state is not FireworkState.ASCENDING:
            return
        self.state = FireworkState.EXPLODED

        rng = self._rng
        palette = [self.color] + [random_vivid(rng) for _ in range(PALETTE_EXTRA)]
        x, y = self.body.position
        for _ in range(randint(rng, *BURST_COUNT)):
            angle = rand(rng, 0.0, 2 * math.pi)
            vx, vy = vec.from_polar(angle, rand(rng, *BURST_SPEED))
            lifetime = rand(rng, *BURST_LIFETIME)
            size = rand(rng, *BURST_SIZE)
            color = pick(rng, palette).with_alpha(1.0)
            self.sparks.append(spawn_particle(
                rng, x, y, vx, vy, lifetime, color, size,
                drag=rand(rng, *BURST_DRAG),
                gravity=rand(rng, *BURST_GRAVITY),
            ))

    def draw(self, surface: Surface) -> None:
        if self.state is FireworkState.ASCENDING:
            x, y = self.body.position
            surface.save()
            surface.set_blend(Blend.LIGHTER)
            surface.fill_circle(x, y, ROCKET_RADIUS, self.color.to_rgba())
            surface.restore()
        for particle in self.particles:
            particle.draw(surface)


def _advance(particles: list[Particle], dt: float) -> list[Particle]:
    for particle in particles:
        particle.update(dt)
    return [p for p in particles if not p.dead]
