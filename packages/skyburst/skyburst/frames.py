"""FrameScheduler - display-refresh callback queue."""
from __future__ import annotations

from skyburst.types import FrameCallback


class FrameScheduler:
    """Pending frame callbacks keyed by handle.

    The host calls ``dispatch`` once per display refresh. Callbacks
    requested while a dispatch is running wait for the next one, so a
    callback that reschedules itself runs exactly once per frame.
    """

    def __init__(self) -> None:
        self._pending: dict[int, FrameCallback] = {}
        self._next_handle = 1

    def request(self, callback: FrameCallback) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._pending[handle] = callback
        return handle

    def cancel(self, handle: int | None) -> None:
        if handle is not None:
            self._pending.pop(handle, None)

    def pending(self) -> int:
        return len(self._pending)

    def dispatch(self, ts: float) -> int:
        snapshot = self._pending
        self._pending = {}
        for callback in snapshot.values():
            callback(ts)
        return len(snapshot)
