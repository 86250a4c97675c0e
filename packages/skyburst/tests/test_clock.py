"""Tests for frame deltas and FrameContext generation."""

import random

import pytest
from skyburst.clock import FrameClock
from skyburst.types import FrameContext

_test_rng = random.Random(0)


def test_clock_initialization():
    clock = FrameClock(max_dt=0.033)
    assert clock.max_dt == 0.033
    assert clock.frame_number == 0
    assert clock.elapsed == 0.0
    assert clock.last_timestamp is None


@pytest.mark.parametrize("max_dt", [0, -0.1])
def test_non_positive_max_dt_rejected(max_dt):
    with pytest.raises(ValueError):
        FrameClock(max_dt=max_dt)


def test_first_timestamp_yields_zero_delta():
    clock = FrameClock(max_dt=0.033)
    assert clock.delta(12.5) == 0.0
    assert clock.last_timestamp == 12.5


def test_delta_is_time_since_previous_frame():
    clock = FrameClock(max_dt=0.033)
    clock.delta(1.0)
    assert abs(clock.delta(1.016) - 0.016) < 1e-9


def test_delta_clamped_after_stall():
    """A background-tab sized gap collapses to one max-sized step."""
    clock = FrameClock(max_dt=0.033)
    clock.delta(1.0)
    assert clock.delta(6.0) == 0.033
    # the stall does not carry over into the next frame
    assert abs(clock.delta(6.01) - 0.01) < 1e-9


def test_backwards_timestamp_yields_zero_delta():
    clock = FrameClock(max_dt=0.033)
    clock.delta(2.0)
    assert clock.delta(1.99) == 0.0


def test_advance_counts_frames_and_elapsed():
    clock = FrameClock(max_dt=0.033)
    assert clock.advance(0.01) == 1
    assert clock.advance(0.02) == 2
    assert clock.frame_number == 2
    assert abs(clock.elapsed - 0.03) < 1e-9


def test_context_fields():
    clock = FrameClock(max_dt=0.033)
    clock.advance(0.016)
    ctx = clock.context(0.016, _test_rng)
    assert isinstance(ctx, FrameContext)
    assert ctx.frame_number == 1
    assert ctx.dt == 0.016
    assert abs(ctx.elapsed - 0.016) < 1e-9
    assert ctx.random is _test_rng


def test_context_is_frozen():
    clock = FrameClock(max_dt=0.033)
    ctx = clock.context(0.0, _test_rng)
    with pytest.raises(AttributeError):
        ctx.dt = 1.0
