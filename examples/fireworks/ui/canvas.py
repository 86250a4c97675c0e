"""Pygame implementation of the skyburst drawing surface.

Everything is painted into an off-screen backing buffer sized in device
pixels; ``present`` scales the buffer onto the window. The buffer is
never cleared between frames, so the show's translucent veil leaves
motion trails.
"""
from __future__ import annotations

import math

import pygame

from skyburst_pyro import RGBA, Blend
from skyburst_pyro.surface import ColorStop

from ui.constants import GLOW_RINGS, SKY_COLOR


class PygameCanvas:
    def __init__(self, window: pygame.Surface, pixel_ratio: float | None = None) -> None:
        self._window = window
        self._ratio_override = pixel_ratio
        self._buffer = pygame.Surface(window.get_size())
        self._buffer.fill(SKY_COLOR)
        self._scale = 1.0
        self._blend = Blend.NORMAL
        self._stack: list[Blend] = []
        self._glow_key: tuple | None = None
        self._glow: pygame.Surface | None = None

    def attach(self, window: pygame.Surface) -> None:
        """Point at a new display surface after the window was resized."""
        self._window = window

    # -- Surface protocol --

    def client_size(self) -> tuple[float, float]:
        width, height = pygame.display.get_window_size()
        return float(width), float(height)

    def pixel_ratio(self) -> float:
        if self._ratio_override is not None:
            return self._ratio_override
        window_w, _ = pygame.display.get_window_size()
        if window_w <= 0:
            return 1.0
        return self._window.get_width() / window_w

    def set_backing_size(self, width: int, height: int) -> None:
        width, height = max(1, width), max(1, height)
        if self._buffer.get_size() == (width, height):
            return
        self._buffer = pygame.Surface((width, height))
        self._buffer.fill(SKY_COLOR)
        self._glow_key = None

    def set_transform(self, scale: float) -> None:
        self._scale = scale

    def save(self) -> None:
        self._stack.append(self._blend)

    def restore(self) -> None:
        self._blend = self._stack.pop()

    def set_blend(self, blend: Blend) -> None:
        self._blend = blend

    def fill_rect(self, x: float, y: float, width: float, height: float, color: RGBA) -> None:
        s = self._scale
        rect = pygame.Rect(round(x * s), round(y * s), math.ceil(width * s), math.ceil(height * s))
        if color[3] >= 255 and self._blend is Blend.NORMAL:
            self._buffer.fill(color[:3], rect)
            return
        patch = self._patch(rect.size)
        patch.fill(self._paint(color))
        self._blit(patch, rect.topleft)

    def fill_circle(self, x: float, y: float, radius: float, color: RGBA) -> None:
        if color[3] <= 0:
            return
        s = self._scale
        r = max(1.0, radius * s)
        side = math.ceil(r * 2) + 2
        patch = self._patch((side, side))
        pygame.draw.circle(patch, self._paint(color), (side / 2, side / 2), r)
        self._blit(patch, (round(x * s - side / 2), round(y * s - side / 2)))

    def fill_radial_gradient(
        self,
        cx: float,
        cy: float,
        r0: float,
        r1: float,
        stops: tuple[ColorStop, ...],
    ) -> None:
        key = (self._buffer.get_size(), round(cx), round(cy), round(r0), round(r1), tuple(stops))
        if key != self._glow_key:
            self._glow = self._render_glow(cx, cy, r0, r1, stops)
            self._glow_key = key
        self._buffer.blit(self._glow, (0, 0))

    # -- Presentation --

    def present(self) -> None:
        size = self._window.get_size()
        if self._buffer.get_size() == size:
            self._window.blit(self._buffer, (0, 0))
        else:
            self._window.blit(pygame.transform.smoothscale(self._buffer, size), (0, 0))

    # -- Helpers --

    def _patch(self, size: tuple[int, int]) -> pygame.Surface:
        # Additive patches are opaque black so untouched pixels add nothing.
        if self._blend is Blend.LIGHTER:
            patch = pygame.Surface(size)
            patch.fill((0, 0, 0))
            return patch
        return pygame.Surface(size, pygame.SRCALPHA)

    def _paint(self, color: RGBA) -> tuple[int, ...]:
        r, g, b, a = color
        if self._blend is Blend.LIGHTER:
            return (r * a // 255, g * a // 255, b * a // 255)
        return (r, g, b, a)

    def _blit(self, patch: pygame.Surface, pos: tuple[int, int]) -> None:
        if self._blend is Blend.LIGHTER:
            self._buffer.blit(patch, pos, special_flags=pygame.BLEND_RGB_ADD)
        else:
            self._buffer.blit(patch, pos)

    def _render_glow(
        self, cx: float, cy: float, r0: float, r1: float, stops: tuple[ColorStop, ...],
    ) -> pygame.Surface:
        s = self._scale
        glow = pygame.Surface(self._buffer.get_size(), pygame.SRCALPHA)
        center = (cx * s, cy * s)
        for ring in range(GLOW_RINGS, -1, -1):
            t = ring / GLOW_RINGS
            radius = (r0 + (r1 - r0) * t) * s
            pygame.draw.circle(glow, _color_at(stops, t), center, max(1.0, radius))
        return glow


def _color_at(stops: tuple[ColorStop, ...], t: float) -> RGBA:
    """Linear interpolation between the two stops around offset ``t``."""
    lo_offset, lo_color = stops[0]
    for hi_offset, hi_color in stops[1:]:
        if t <= hi_offset:
            span = hi_offset - lo_offset
            k = 0.0 if span <= 0 else (t - lo_offset) / span
            return tuple(round(a + (b - a) * k) for a, b in zip(lo_color, hi_color))
        lo_offset, lo_color = hi_offset, hi_color
    return lo_color
