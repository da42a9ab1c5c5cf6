"""Pet configuration dataclass and presets."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PetConfig:
    """Immutable tuning for one pet session.

    Attributes:
        max_value: Upper bound of both vital stats.
        hunger_period_ms: Milliseconds between hunger decay ticks.
        happiness_period_ms: Milliseconds between happiness decay ticks.
        feed_amount: Hunger restored by ``feed``.
        pet_amount: Happiness restored by ``pet``.
        dance_hunger_cost: Hunger spent by ``dance``.
        dance_enabled: Whether ``dance`` is part of the command vocabulary.
        dance_period_ms: Milliseconds between dance frame flips.
        blink_min_hold_ms: Shortest open-eye hold between blinks.
        blink_max_hold_ms: Longest open-eye hold between blinks.
        blink_duration_ms: How long the blink frame stays up.
        log_size: Maximum entries kept in the session event log (0 = unbounded).
    """

    max_value: int = 20
    hunger_period_ms: int = 4000
    happiness_period_ms: int = 3000
    feed_amount: int = 5
    pet_amount: int = 3
    dance_hunger_cost: int = 3
    dance_enabled: bool = True
    dance_period_ms: int = 500
    blink_min_hold_ms: int = 1000
    blink_max_hold_ms: int = 3000
    blink_duration_ms: int = 200
    log_size: int = 256

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if self.max_value <= 0:
            raise ValueError("max_value must be positive")
        for name in (
            "hunger_period_ms",
            "happiness_period_ms",
            "dance_period_ms",
            "blink_duration_ms",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if self.blink_min_hold_ms < 0:
            raise ValueError("blink_min_hold_ms must be non-negative")
        if self.blink_min_hold_ms > self.blink_max_hold_ms:
            raise ValueError(
                f"blink_min_hold_ms ({self.blink_min_hold_ms}) exceeds "
                f"blink_max_hold_ms ({self.blink_max_hold_ms})"
            )
        if self.log_size < 0:
            raise ValueError("log_size must be non-negative")

    @property
    def commands(self) -> tuple[str, ...]:
        """Supported command words, in help-text order."""
        if self.dance_enabled:
            return ("feed", "pet", "dance")
        return ("feed", "pet")


CANONICAL = PetConfig()

# Dance-less variant with faster decay.
REDUCED = PetConfig(
    hunger_period_ms=2000,
    happiness_period_ms=1500,
    dance_enabled=False,
)
