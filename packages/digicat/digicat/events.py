"""Bounded chronicle of session events stamped with virtual time."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterator


@dataclass(frozen=True)
class Event:
    time_ms: int
    type: str
    data: dict[str, Any]


class EventLog:
    def __init__(self, max_entries: int = 0) -> None:
        maxlen = max_entries if max_entries > 0 else None
        self._events: deque[Event] = deque(maxlen=maxlen)

    def emit(self, time_ms: int, type: str, **data: Any) -> Event:
        event = Event(time_ms=time_ms, type=type, data=data)
        self._events.append(event)
        return event

    def query(self, type: str | None = None, after: int | None = None,
              before: int | None = None) -> list[Event]:
        """Events filtered by type and an exclusive time window."""
        return [
            e for e in self._events
            if (type is None or e.type == type)
            and (after is None or e.time_ms > after)
            and (before is None or e.time_ms < before)
        ]

    def last(self, type: str) -> Event | None:
        return next((e for e in reversed(self._events) if e.type == type), None)

    def clear(self) -> None:
        self._events.clear()

    def __iter__(self) -> Iterator[Event]:
        return iter(list(self._events))

    def __len__(self) -> int:
        return len(self._events)
