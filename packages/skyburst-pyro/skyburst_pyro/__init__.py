"""skyburst-pyro - Rockets, bursts, and the show that runs them."""
from __future__ import annotations

from skyburst_pyro.color import HSLA, mix, random_vivid
from skyburst_pyro.firework import Firework, FireworkState
from skyburst_pyro.particle import Particle, spawn_particle
from skyburst_pyro.rng import pick, rand, randint
from skyburst_pyro.show import ALL_CLEAR_DELAY, MAX_FRAME_DT, Show
from skyburst_pyro.surface import Blend, Message, Surface
from skyburst_pyro.systems import make_fade_system, make_firework_system
from skyburst_pyro.types import RGBA, Entity

__all__ = [
    "ALL_CLEAR_DELAY",
    "Blend",
    "Entity",
    "Firework",
    "FireworkState",
    "HSLA",
    "MAX_FRAME_DT",
    "Message",
    "Particle",
    "RGBA",
    "Show",
    "Surface",
    "make_fade_system",
    "make_firework_system",
    "mix",
    "pick",
    "rand",
    "randint",
    "random_vivid",
    "spawn_particle",
]
