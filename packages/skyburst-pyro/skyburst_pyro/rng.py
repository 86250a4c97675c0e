"""Range helpers over an injected random source.

Every helper takes the ``random.Random`` to draw from as its first
argument; nothing here touches the module-level generator.
"""
from __future__ import annotations

import math
import random
from typing import Sequence, TypeVar

T = TypeVar("T")


def rand(rng: random.Random, lo: float, hi: float) -> float:
    """Uniform float in [lo, hi)."""
    return lo + rng.random() * (hi - lo)


def randint(rng: random.Random, lo: int, hi: int) -> int:
    """Uniform integer in [lo, hi], both ends inclusive."""
    return math.floor(rand(rng, lo, hi + 1))


def pick(rng: random.Random, items: Sequence[T]) -> T:
    """Uniform element of ``items``. Raises IndexError when empty."""
    return rng.choice(items)
