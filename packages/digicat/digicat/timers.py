"""TimerService - deferred and repeating callbacks on a virtual clock."""
from __future__ import annotations

import heapq
from dataclasses import dataclass, field

from digicat.clock import Clock
from digicat.types import TimerCallback


@dataclass(eq=False)
class TimerHandle:
    """Handle for a scheduled callback.

    ``period_ms`` is None for one-shot timers. ``timer_id`` doubles as the
    registration order used to break ties between timers due at the same
    instant.
    """

    timer_id: int
    due_ms: int
    callback: TimerCallback = field(repr=False)
    period_ms: int | None = None
    cancelled: bool = False
    fired: bool = False

    @property
    def repeating(self) -> bool:
        return self.period_ms is not None

    @property
    def active(self) -> bool:
        if self.cancelled:
            return False
        return self.repeating or not self.fired


class TimerService:
    """Single-threaded scheduler. Time only moves through ``advance``."""

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock if clock is not None else Clock()
        self._next_id = 0
        self._queue: list[tuple[int, int, TimerHandle]] = []
        self._live: dict[int, TimerHandle] = {}

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def now_ms(self) -> int:
        return self._clock.now_ms

    def after(self, delay_ms: int, fn: TimerCallback) -> TimerHandle:
        if delay_ms < 0:
            raise ValueError("delay_ms must be non-negative")
        return self._schedule(delay_ms, fn, None)

    def every(self, period_ms: int, fn: TimerCallback) -> TimerHandle:
        if period_ms <= 0:
            raise ValueError("period_ms must be positive")
        return self._schedule(period_ms, fn, period_ms)

    def cancel(self, handle: TimerHandle | None) -> None:
        """Cancel *handle*. Safe on None, fired or already-cancelled handles."""
        if handle is None or handle.cancelled:
            return
        handle.cancelled = True
        self._live.pop(handle.timer_id, None)

    def cancel_all(self) -> None:
        for handle in list(self._live.values()):
            handle.cancelled = True
        self._live.clear()
        self._queue.clear()

    def pending(self) -> int:
        """Return the number of timers that can still fire."""
        return len(self._live)

    def advance(self, ms: int) -> int:
        """Move time forward by *ms*, firing everything due on the way.

        Callbacks run in ``(due time, registration order)`` order. Timers
        armed by a callback fire in the same call if they come due before
        the target time. Returns the number of callbacks invoked.
        """
        if ms < 0:
            raise ValueError("cannot advance time backwards")
        target = self._clock.now_ms + ms
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self._clock.advance_to(due)
            if not handle.repeating:
                handle.fired = True
                self._live.pop(handle.timer_id, None)
            fired += 1
            try:
                handle.callback()
            finally:
                # The callback may have cancelled its own handle.
                if handle.repeating and not handle.cancelled:
                    handle.due_ms = due + handle.period_ms
                    heapq.heappush(
                        self._queue, (handle.due_ms, handle.timer_id, handle)
                    )
        self._clock.advance_to(target)
        return fired

    def _schedule(
        self, delay_ms: int, fn: TimerCallback, period_ms: int | None
    ) -> TimerHandle:
        handle = TimerHandle(
            timer_id=self._next_id,
            due_ms=self._clock.now_ms + delay_ms,
            callback=fn,
            period_ms=period_ms,
        )
        self._next_id += 1
        self._live[handle.timer_id] = handle
        heapq.heappush(self._queue, (handle.due_ms, handle.timer_id, handle))
        return handle
