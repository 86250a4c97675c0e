"""skyburst - A small frame-driven engine for particle shows."""

from skyburst.clock import FrameClock
from skyburst.engine import Engine
from skyburst.frames import FrameScheduler
from skyburst.types import DeadEntityError, EntityId, FrameContext
from skyburst.world import World

__all__ = [
    "Engine",
    "World",
    "FrameClock",
    "FrameScheduler",
    "FrameContext",
    "EntityId",
    "DeadEntityError",
]
