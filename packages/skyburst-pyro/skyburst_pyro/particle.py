"""Fading spark advanced by semi-implicit Euler integration."""
from __future__ import annotations

import math
import random
from dataclasses import dataclass

from skyburst_physics import Body, integrate

from skyburst_pyro.color import HSLA
from skyburst_pyro.surface import Blend, Surface

DEFAULT_GRAVITY = 80.0  # px/s^2
DEFAULT_DRAG = 0.995
FLICKER_CHANCE = 0.5
FLICKER_RATE = 20.0  # rad/s


@dataclass
class Particle:
    body: Body
    lifetime: float
    color: HSLA
    size: float = 2.0
    flicker: bool = False
    age: float = 0.0
    dead: bool = False

    def __post_init__(self) -> None:
        if self.lifetime <= 0:
            raise ValueError("lifetime must be positive")

    @property
    def life_fraction(self) -> float:
        return self.age / self.lifetime

    def update(self, dt: float) -> None:
        self.age += dt
        if self.age >= self.lifetime:
            self.dead = True
            return
        integrate(self.body, dt)

    def alpha(self) -> float:
        alpha = max(0.0, 1.0 - self.life_fraction)
        if self.flicker:
            alpha *= 0.6 + 0.4 * math.sin(self.age * FLICKER_RATE)
        return alpha

    def radius(self) -> float:
        return self.size * (1.0 + 0.5 * (1.0 - self.life_fraction))

    def draw(self, surface: Surface) -> None:
        x, y = self.body.position
        surface.save()
        surface.set_blend(Blend.LIGHTER)
        surface.fill_circle(x, y, self.radius(), self.color.with_alpha(self.alpha()).to_rgba())
        surface.restore()


def spawn_particle(
    rng: random.Random,
    x: float,
    y: float,
    vx: float,
    vy: float,
    lifetime: float,
    color: HSLA,
    size: float = 2.0,
    drag: float = DEFAULT_DRAG,
    gravity: float = DEFAULT_GRAVITY,
) -> Particle:
    """Build a Particle; about half of them flicker."""
    return Particle(
        body=Body(position=(x, y), velocity=(vx, vy), drag=drag, gravity=gravity),
        lifetime=lifetime,
        color=color,
        size=size,
        flicker=rng.random() < FLICKER_CHANCE,
    )
