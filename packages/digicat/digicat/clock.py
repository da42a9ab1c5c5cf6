"""Clock - virtual millisecond time for the timer service."""


class Clock:
    def __init__(self, start_ms: int = 0) -> None:
        if start_ms < 0:
            raise ValueError("start_ms must be non-negative")
        self._now_ms = start_ms

    @property
    def now_ms(self) -> int:
        return self._now_ms

    def advance(self, ms: int) -> int:
        if ms < 0:
            raise ValueError("cannot advance clock backwards")
        self._now_ms += ms
        return self._now_ms

    def advance_to(self, time_ms: int) -> int:
        if time_ms < self._now_ms:
            raise ValueError(
                f"cannot move clock from {self._now_ms} back to {time_ms}"
            )
        self._now_ms = time_ms
        return self._now_ms
