"""Animation scheduler - blink, dance and death frame selection."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable

from digicat.config import PetConfig
from digicat.timers import TimerHandle, TimerService
from digicat.types import MODE_FRAMES, AnimMode, FrameId

logger = logging.getLogger(__name__)

HoldProvider = Callable[[], int]
TransitionCallback = Callable[[AnimMode, AnimMode], None]


@dataclass
class AnimationState:
    mode: AnimMode = AnimMode.IDLE
    frame_index: int = 0

    @property
    def frame(self) -> FrameId:
        return MODE_FRAMES[self.mode][self.frame_index]


def random_hold(config: PetConfig, rng: random.Random) -> HoldProvider:
    """Return a provider drawing open-eye holds uniformly from the config range."""

    def draw() -> int:
        return rng.randint(config.blink_min_hold_ms, config.blink_max_hold_ms)

    return draw


class AnimationScheduler:
    """Drives an AnimationState through Idle, Blinking, Dancing and Dead.

    At most one timer is live at a time and it always belongs to the current
    mode; every mode change cancels it first.
    """

    def __init__(
        self,
        state: AnimationState,
        timers: TimerService,
        config: PetConfig,
        hold_provider: HoldProvider,
        on_transition: TransitionCallback | None = None,
    ) -> None:
        self._state = state
        self._timers = timers
        self._config = config
        self._hold = hold_provider
        self._on_transition = on_transition
        self._timer: TimerHandle | None = None

    @property
    def state(self) -> AnimationState:
        return self._state

    @property
    def mode(self) -> AnimMode:
        return self._state.mode

    def current_frame(self) -> FrameId:
        return self._state.frame

    def reset(self) -> None:
        """Return to Idle(open) from any mode and start a fresh blink cycle."""
        self._enter_idle()

    def enter_dead(self) -> None:
        if self._state.mode is AnimMode.DEAD:
            return
        self._cancel_timer()
        self._set_mode(AnimMode.DEAD)

    def enter_dancing(self) -> None:
        if self._state.mode is AnimMode.DEAD:
            return
        self._cancel_timer()
        self._set_mode(AnimMode.DANCING)
        self._timer = self._timers.every(self._config.dance_period_ms, self._flip)

    def stop_dancing(self) -> None:
        if self._state.mode is AnimMode.DANCING:
            self._enter_idle()

    def stop(self) -> None:
        """Release the active timer, leaving the current frame on display."""
        self._cancel_timer()

    # -- internal transitions --

    def _enter_idle(self) -> None:
        self._cancel_timer()
        self._set_mode(AnimMode.IDLE)
        self._timer = self._timers.after(self._hold(), self._blink)

    def _blink(self) -> None:
        self._set_mode(AnimMode.BLINKING)
        self._timer = self._timers.after(
            self._config.blink_duration_ms, self._enter_idle
        )

    def _flip(self) -> None:
        frames = MODE_FRAMES[AnimMode.DANCING]
        self._state.frame_index = (self._state.frame_index + 1) % len(frames)

    def _cancel_timer(self) -> None:
        self._timers.cancel(self._timer)
        self._timer = None

    def _set_mode(self, mode: AnimMode) -> None:
        old = self._state.mode
        self._state.mode = mode
        self._state.frame_index = 0
        if old is not mode:
            logger.debug("animation %s -> %s", old.value, mode.value)
            if self._on_transition is not None:
                self._on_transition(old, mode)
