"""Tests for 2D vector helpers."""
from __future__ import annotations

import math

from skyburst_physics import vec


class TestVec:
    def test_add(self) -> None:
        assert vec.add((1.0, 2.0), (3.0, -4.0)) == (4.0, -2.0)

    def test_scale(self) -> None:
        assert vec.scale((1.5, -2.0), 2.0) == (3.0, -4.0)

    def test_from_polar_right(self) -> None:
        x, y = vec.from_polar(0.0, 10.0)
        assert math.isclose(x, 10.0)
        assert math.isclose(y, 0.0, abs_tol=1e-12)

    def test_from_polar_quarter_turn_points_down(self) -> None:
        x, y = vec.from_polar(math.pi / 2, 3.0)
        assert math.isclose(x, 0.0, abs_tol=1e-12)
        assert math.isclose(y, 3.0)

    def test_from_polar_length(self) -> None:
        assert math.isclose(math.hypot(*vec.from_polar(1.234, 250.0)), 250.0)
