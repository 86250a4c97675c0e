"""Shared type aliases and protocols for the frame engine."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

EntityId = int


@dataclass(frozen=True, slots=True)
class FrameContext:
    frame_number: int
    dt: float
    elapsed: float
    random: _random.Random


class DeadEntityError(KeyError):
    """Raised when operating on an entity that is not alive."""

    def __init__(self, entity_id: int, message: str) -> None:
        self.entity_id = entity_id
        super().__init__(message)


if TYPE_CHECKING:
    from skyburst.world import World

System = Callable[["World", FrameContext], None]
FrameCallback = Callable[[float], None]
