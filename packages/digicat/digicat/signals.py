"""In-memory pub/sub bus for session notifications."""
from __future__ import annotations

from collections import deque
from typing import Any, Callable

from digicat.types import Disposer

Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:
    """Queues published signals until ``flush`` delivers them.

    Handlers run in subscription order. Signals published by a handler during
    a flush are delivered by that same flush, after the ones already queued.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = {}
        self._outbox: deque[tuple[str, dict[str, Any]]] = deque()

    def subscribe(self, signal_name: str, handler: Handler) -> Disposer:
        """Register *handler*; the returned disposer unsubscribes it."""
        self._handlers.setdefault(signal_name, []).append(handler)
        return lambda: self.unsubscribe(signal_name, handler)

    def unsubscribe(self, signal_name: str, handler: Handler) -> None:
        handlers = self._handlers.get(signal_name)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._outbox.append((signal_name, dict(data)))

    def pending(self) -> int:
        return len(self._outbox)

    def flush(self) -> int:
        """Deliver queued signals. Returns how many were delivered."""
        delivered = 0
        while self._outbox:
            signal_name, data = self._outbox.popleft()
            for handler in tuple(self._handlers.get(signal_name, ())):
                handler(signal_name, data)
            delivered += 1
        return delivered

    def clear(self) -> int:
        """Drop undelivered signals. Returns how many were dropped."""
        dropped = len(self._outbox)
        self._outbox.clear()
        return dropped
