"""Drawing-surface and message protocols the show renders through."""
from __future__ import annotations

from enum import Enum
from typing import Protocol, Sequence

from skyburst_pyro.types import RGBA

ColorStop = tuple[float, RGBA]


class Blend(Enum):
    NORMAL = "source-over"
    LIGHTER = "lighter"


class Surface(Protocol):
    """Immediate-mode 2D canvas.

    Coordinates passed to the fill methods are logical units; the
    surface maps them to backing pixels through the transform set by
    ``set_transform``.
    """

    def client_size(self) -> tuple[float, float]:
        """On-screen size in logical units."""
        ...

    def pixel_ratio(self) -> float: ...

    def set_backing_size(self, width: int, height: int) -> None: ...

    def set_transform(self, scale: float) -> None: ...

    def save(self) -> None: ...

    def restore(self) -> None: ...

    def set_blend(self, blend: Blend) -> None: ...

    def fill_rect(self, x: float, y: float, width: float, height: float, color: RGBA) -> None: ...

    def fill_circle(self, x: float, y: float, radius: float, color: RGBA) -> None: ...

    def fill_radial_gradient(
        self,
        cx: float,
        cy: float,
        r0: float,
        r1: float,
        stops: Sequence[ColorStop],
    ) -> None:
        """Fill the whole surface with a radial gradient between two circles."""
        ...


class Message(Protocol):
    """The completion notice shown once a show has burnt out."""

    def show(self) -> None: ...

    def hide(self) -> None: ...
