"""System factory for signal dispatch."""
from __future__ import annotations

from typing import TYPE_CHECKING

from skyburst_signal.bus import SignalBus

if TYPE_CHECKING:
    from skyburst.types import System


def make_signal_system(bus: SignalBus) -> "System":
    """Flush ``bus`` once per frame. Register it after the systems that publish."""

    def signal_system(world, ctx) -> None:
        bus.flush()

    return signal_system
