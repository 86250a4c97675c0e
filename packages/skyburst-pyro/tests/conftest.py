"""Recording fakes for the drawing surface and the completion message."""
from __future__ import annotations

import random

import pytest

from skyburst import FrameScheduler
from skyburst_pyro.surface import Blend


class RecordingSurface:
    def __init__(self, size: tuple[float, float] = (800.0, 600.0), ratio: float = 1.0) -> None:
        self.size = size
        self.ratio = ratio
        self.backing: tuple[int, int] | None = None
        self.scale: float | None = None
        self.blend = Blend.NORMAL
        self.ops: list[tuple] = []
        self._stack: list[Blend] = []

    def client_size(self) -> tuple[float, float]:
        return self.size

    def pixel_ratio(self) -> float:
        return self.ratio

    def set_backing_size(self, width: int, height: int) -> None:
        self.backing = (width, height)

    def set_transform(self, scale: float) -> None:
        self.scale = scale

    def save(self) -> None:
        self._stack.append(self.blend)

    def restore(self) -> None:
        self.blend = self._stack.pop()

    def set_blend(self, blend: Blend) -> None:
        self.blend = blend

    def fill_rect(self, x, y, width, height, color) -> None:
        self.ops.append(("rect", (x, y, width, height), color, self.blend))

    def fill_circle(self, x, y, radius, color) -> None:
        self.ops.append(("circle", (x, y), radius, color, self.blend))

    def fill_radial_gradient(self, cx, cy, r0, r1, stops) -> None:
        self.ops.append(("gradient", (cx, cy), (r0, r1), tuple(stops)))

    def kinds(self) -> list[str]:
        return [op[0] for op in self.ops]


class RecordingMessage:
    def __init__(self) -> None:
        self.visible = False
        self.calls: list[str] = []

    def show(self) -> None:
        self.visible = True
        self.calls.append("show")

    def hide(self) -> None:
        self.visible = False
        self.calls.append("hide")


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def message() -> RecordingMessage:
    return RecordingMessage()


@pytest.fixture
def scheduler() -> FrameScheduler:
    return FrameScheduler()


@pytest.fixture
def make_surface():
    return RecordingSurface
