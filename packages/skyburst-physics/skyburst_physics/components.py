"""Physics components."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Body:
    """Point mass with per-step velocity drag and constant downward gravity.

    ``drag`` is a multiplicative factor applied to the velocity on every
    step (1.0 means no drag). ``gravity`` is in px/s^2, positive down.
    """

    position: tuple[float, float]
    velocity: tuple[float, float]
    drag: float = 1.0
    gravity: float = 0.0
