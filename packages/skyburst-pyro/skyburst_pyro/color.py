"""Structured HSLA colors, formatted only when drawn."""
from __future__ import annotations

import colorsys
import dataclasses
import random
from dataclasses import dataclass

from skyburst_pyro.rng import rand
from skyburst_pyro.types import RGBA


@dataclass(frozen=True, slots=True)
class HSLA:
    """Hue in degrees, saturation and lightness in percent, alpha in 0..1."""

    hue: float
    saturation: float
    lightness: float
    alpha: float = 1.0

    def with_alpha(self, alpha: float) -> HSLA:
        return dataclasses.replace(self, alpha=alpha)

    def to_rgba(self) -> RGBA:
        r, g, b = colorsys.hls_to_rgb(
            (self.hue % 360.0) / 360.0,
            self.lightness / 100.0,
            self.saturation / 100.0,
        )
        a = min(1.0, max(0.0, self.alpha))
        return (round(r * 255), round(g * 255), round(b * 255), round(a * 255))


def random_vivid(rng: random.Random, alpha: float = 1.0) -> HSLA:
    """Saturated mid-lightness color with a uniformly random hue."""
    return HSLA(
        hue=rand(rng, 0.0, 360.0),
        saturation=rand(rng, 80.0, 100.0),
        lightness=rand(rng, 50.0, 60.0),
        alpha=alpha,
    )


def mix(c1: HSLA, c2: HSLA, t: float = 0.5) -> HSLA:
    """Hue and alpha derived from ``t`` alone; the inputs are not blended."""
    return HSLA(hue=t * 360.0, saturation=90.0, lightness=60.0, alpha=t)
