"""Shared aliases and the entity protocol."""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

# 8-bit channels; alpha 0..255.
RGBA = tuple[int, int, int, int]

if TYPE_CHECKING:
    from skyburst_pyro.surface import Surface


@runtime_checkable
class Entity(Protocol):
    """Anything the show can advance and paint. Particle and Firework."""

    @property
    def dead(self) -> bool: ...

    def update(self, dt: float) -> None: ...

    def draw(self, surface: Surface) -> None: ...
