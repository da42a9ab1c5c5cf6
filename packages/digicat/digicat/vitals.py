"""Vital stats and the decay engine that drives them."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from digicat.config import PetConfig
from digicat.timers import TimerHandle, TimerService
from digicat.types import Disposer, Stat

logger = logging.getLogger(__name__)

DiedCallback = Callable[[Stat], None]


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


@dataclass
class VitalStats:
    hunger: int
    happiness: int
    max_value: int = 20

    def __post_init__(self) -> None:
        if self.max_value <= 0:
            raise ValueError("max_value must be positive")
        self.hunger = clamp(self.hunger, 0, self.max_value)
        self.happiness = clamp(self.happiness, 0, self.max_value)

    @classmethod
    def full(cls, max_value: int) -> VitalStats:
        return cls(hunger=max_value, happiness=max_value, max_value=max_value)

    def get(self, stat: Stat) -> int:
        return getattr(self, stat.value)

    def set(self, stat: Stat, value: int) -> int:
        """Store *value* clamped into ``[0, max_value]`` and return it."""
        value = clamp(value, 0, self.max_value)
        setattr(self, stat.value, value)
        return value


class VitalsEngine:
    """Owns the hunger and happiness decay timers for one VitalStats.

    ``start()`` acquires two repeating timers and returns a disposer that
    releases them. The first decay tick that takes a stat to zero stops both
    timers and notifies ``on_died`` listeners exactly once.
    """

    def __init__(
        self, stats: VitalStats, timers: TimerService, config: PetConfig
    ) -> None:
        self._stats = stats
        self._timers = timers
        self._config = config
        self._hunger_timer: TimerHandle | None = None
        self._happiness_timer: TimerHandle | None = None
        self._cause: Stat | None = None
        self._died_hooks: list[DiedCallback] = []

    @property
    def stats(self) -> VitalStats:
        return self._stats

    @property
    def is_dead(self) -> bool:
        return self._cause is not None

    @property
    def cause(self) -> Stat | None:
        return self._cause

    @property
    def running(self) -> bool:
        return self._hunger_timer is not None or self._happiness_timer is not None

    def on_died(self, callback: DiedCallback) -> None:
        self._died_hooks.append(callback)

    def start(self) -> Disposer:
        if self.is_dead or self.running:
            return self.stop
        self._hunger_timer = self._timers.every(
            self._config.hunger_period_ms, lambda: self._decay(Stat.HUNGER)
        )
        self._happiness_timer = self._timers.every(
            self._config.happiness_period_ms, lambda: self._decay(Stat.HAPPINESS)
        )
        logger.debug(
            "decay started: hunger every %dms, happiness every %dms",
            self._config.hunger_period_ms,
            self._config.happiness_period_ms,
        )
        return self.stop

    def stop(self) -> None:
        self._timers.cancel(self._hunger_timer)
        self._timers.cancel(self._happiness_timer)
        self._hunger_timer = None
        self._happiness_timer = None

    def adjust(self, stat: Stat, delta: int) -> int:
        if self.is_dead:
            return self._stats.get(stat)
        return self._stats.set(stat, self._stats.get(stat) + delta)

    def fill(self, stat: Stat) -> int:
        if self.is_dead:
            return self._stats.get(stat)
        return self._stats.set(stat, self._stats.max_value)

    def _decay(self, stat: Stat) -> None:
        if self.is_dead:
            return
        if self._stats.set(stat, self._stats.get(stat) - 1) > 0:
            return
        self._cause = stat
        self.stop()
        logger.info("%s reached zero", stat.value)
        for hook in list(self._died_hooks):
            hook(stat)
