"""Tests for HSLA colors, random_vivid and mix."""
from __future__ import annotations

import random

import pytest

from skyburst_pyro.color import HSLA, mix, random_vivid


class TestHSLA:
    def test_pure_red(self) -> None:
        assert HSLA(0.0, 100.0, 50.0, 1.0).to_rgba() == (255, 0, 0, 255)

    def test_pure_green(self) -> None:
        assert HSLA(120.0, 100.0, 50.0, 1.0).to_rgba() == (0, 255, 0, 255)

    def test_hue_wraps(self) -> None:
        assert HSLA(360.0, 100.0, 50.0).to_rgba() == HSLA(0.0, 100.0, 50.0).to_rgba()

    def test_white_and_black(self) -> None:
        assert HSLA(200.0, 50.0, 100.0).to_rgba()[:3] == (255, 255, 255)
        assert HSLA(200.0, 50.0, 0.0).to_rgba()[:3] == (0, 0, 0)

    def test_alpha_scaled_and_clamped(self) -> None:
        assert HSLA(0.0, 100.0, 50.0, 0.5).to_rgba()[3] == 128
        assert HSLA(0.0, 100.0, 50.0, 1.7).to_rgba()[3] == 255
        assert HSLA(0.0, 100.0, 50.0, -0.2).to_rgba()[3] == 0

    def test_with_alpha_copies(self) -> None:
        base = HSLA(10.0, 90.0, 55.0, 1.0)
        faded = base.with_alpha(0.25)
        assert faded == HSLA(10.0, 90.0, 55.0, 0.25)
        assert base.alpha == 1.0

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            HSLA(0.0, 0.0, 0.0).hue = 5.0


class TestRandomVivid:
    def test_channel_ranges(self, rng: random.Random) -> None:
        for _ in range(1000):
            color = random_vivid(rng)
            assert 0.0 <= color.hue < 360.0
            assert 80.0 <= color.saturation <= 100.0
            assert 50.0 <= color.lightness <= 60.0
            assert color.alpha == 1.0

    def test_alpha_passed_through(self, rng: random.Random) -> None:
        assert random_vivid(rng, alpha=0.3).alpha == 0.3


class TestMix:
    def test_derived_from_t_only(self) -> None:
        a = HSLA(10.0, 20.0, 30.0, 0.4)
        b = HSLA(300.0, 100.0, 70.0, 1.0)
        assert mix(a, b, 0.25) == HSLA(90.0, 90.0, 60.0, 0.25)
        assert mix(b, a, 0.25) == mix(a, b, 0.25)

    def test_default_t(self) -> None:
        c = HSLA(0.0, 0.0, 0.0)
        assert mix(c, c) == HSLA(180.0, 90.0, 60.0, 0.5)
