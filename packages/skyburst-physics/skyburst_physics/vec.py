"""2D vector math helpers operating on tuple[float, float]."""
from __future__ import annotations

import math

Vec = tuple[float, float]


def add(a: Vec, b: Vec) -> Vec:
    return (a[0] + b[0], a[1] + b[1])


def scale(v: Vec, s: float) -> Vec:
    return (v[0] * s, v[1] * s)


def from_polar(angle: float, length: float) -> Vec:
    """Vector of ``length`` pointing at ``angle`` radians (screen space, +y down)."""
    return (math.cos(angle) * length, math.sin(angle) * length)
