"""Semi-implicit Euler integration for Body."""
from __future__ import annotations

from skyburst_physics import vec
from skyburst_physics.components import Body


def integrate(body: Body, dt: float) -> None:
    """Drag and gravity update the velocity first, then the position moves."""
    vx, vy = vec.scale(body.velocity, body.drag)
    body.velocity = (vx, vy + body.gravity * dt)
    body.position = vec.add(body.position, vec.scale(body.velocity, dt))
