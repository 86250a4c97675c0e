"""skyburst-physics - 2D point kinematics with drag and gravity."""
from __future__ import annotations

from skyburst_physics import vec
from skyburst_physics.components import Body
from skyburst_physics.motion import integrate

__all__ = ["Body", "integrate", "vec"]
