"""skyburst-signal - Per-frame event bus for show notifications."""
from __future__ import annotations

from skyburst_signal.bus import SignalBus
from skyburst_signal.systems import make_signal_system

__all__ = ["SignalBus", "make_signal_system"]
