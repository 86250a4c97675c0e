"""Queued pub/sub bus. Signals published during a frame are delivered on flush."""
from __future__ import annotations

from typing import Any, Callable

Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:

    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: Handler) -> None:
        self._handlers.setdefault(signal_name, []).append(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    def flush(self) -> None:
        batch, self._queue = self._queue, []
        for signal_name, data in batch:
            for handler in list(self._handlers.get(signal_name, ())):
                handler(signal_name, data)
