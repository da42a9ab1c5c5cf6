"""Session controller - composes vitals, animation and commands into a game."""
from __future__ import annotations

import logging
import os
import random
from dataclasses import dataclass, field
from typing import Any

from digicat.animation import (
    AnimationScheduler,
    AnimationState,
    HoldProvider,
    random_hold,
)
from digicat.commands import Command, CommandInterpreter
from digicat.config import CANONICAL, PetConfig
from digicat.events import EventLog
from digicat.signals import SignalBus
from digicat.timers import TimerService
from digicat.types import Disposer, FrameId, Phase, Stat
from digicat.vitals import VitalsEngine, VitalStats

logger = logging.getLogger(__name__)

DEATH_MESSAGES: dict[Stat, str] = {
    Stat.HUNGER: "Your cat starved! It is dead.",
    Stat.HAPPINESS: "Your cat got too sad. It has died.",
}

# Signals recorded in the session event log.
_LOGGED_SIGNALS = ("started", "command", "died", "restart")


@dataclass
class SessionState:
    vitals: VitalStats
    animation: AnimationState = field(default_factory=AnimationState)
    is_game_over: bool = False
    last_message: str = ""


@dataclass(frozen=True)
class DisplayState:
    """Read model for the presentation layer."""

    hunger_bar: int
    happiness_bar: int
    max_value: int
    frame: FrameId
    message: str
    is_game_over: bool


class Session:
    """One pet, from ``start()`` through any number of deaths and restarts.

    The session owns its SessionState exclusively and replaces it wholesale on
    restart. Each Playing phase collects the disposers of the timers it
    acquired; they all run when the phase ends (death, restart or ``close``).
    """

    def __init__(
        self,
        config: PetConfig | None = None,
        timers: TimerService | None = None,
        hold_provider: HoldProvider | None = None,
        seed: int | None = None,
    ) -> None:
        self._config = config if config is not None else CANONICAL
        # A session that builds its own timer service tears it down on close().
        self._owns_timers = timers is None
        self._timers = timers if timers is not None else TimerService()

        if seed is None:
            seed = int.from_bytes(os.urandom(8), "big")
        self._seed = seed
        self._hold_provider = hold_provider

        self.bus = SignalBus()
        self.log = EventLog(max_entries=self._config.log_size)
        for name in _LOGGED_SIGNALS:
            self.bus.subscribe(name, self._record)

        self._interpreter = CommandInterpreter(self._config)
        self._phase = Phase.STOPPED
        self._disposers: list[Disposer] = []
        self._build_phase()

    @property
    def config(self) -> PetConfig:
        return self._config

    @property
    def timers(self) -> TimerService:
        return self._timers

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def vitals(self) -> VitalsEngine:
        return self._vitals

    @property
    def animation(self) -> AnimationScheduler:
        return self._animation

    @property
    def interpreter(self) -> CommandInterpreter:
        return self._interpreter

    @property
    def is_game_over(self) -> bool:
        return self._phase is Phase.GAME_OVER

    # -- lifecycle --

    def start(self) -> None:
        """Enter Playing. No-op while already playing."""
        if self._phase is Phase.PLAYING:
            return
        self._build_phase()
        self._enter_playing()

    def restart(self) -> None:
        """Throw away the current game and start a fresh one."""
        self._dispose()
        logger.info("restarting session")
        self.bus.publish("restart")
        self._build_phase()
        self._enter_playing()

    def close(self) -> None:
        """Release every timer the session holds.

        A finished game stays in GAME_OVER so its display state still reads
        as over; a game in progress is stopped.
        """
        self._dispose()
        if self._owns_timers:
            self._timers.cancel_all()
        if self._phase is Phase.PLAYING:
            self._phase = Phase.STOPPED

    def advance(self, ms: int) -> int:
        """Advance the session's timer service by *ms* milliseconds."""
        return self._timers.advance(ms)

    # -- presentation interface --

    def submit_command(self, raw_text: str) -> bool:
        """Route one user submission. Returns False when it was rejected."""
        if self._phase is not Phase.PLAYING:
            logger.debug("rejected %r while %s", raw_text, self._phase.value)
            self._publish_command(raw_text, None, accepted=False)
            return False

        command = self._interpreter.parse(raw_text)
        if command is not Command.EMPTY:
            self._animation.stop_dancing()
        message = self._interpreter.dispatch(command, self._vitals, self._animation)
        if message is not None:
            self._state.last_message = message
        self._publish_command(raw_text, command, accepted=True)
        return True

    def display_state(self) -> DisplayState:
        vitals = self._state.vitals
        return DisplayState(
            hunger_bar=vitals.hunger,
            happiness_bar=vitals.happiness,
            max_value=vitals.max_value,
            frame=self._animation.current_frame(),
            message=self._state.last_message,
            is_game_over=self._state.is_game_over,
        )

    # -- internals --

    def _build_phase(self) -> None:
        self._state = SessionState(vitals=VitalStats.full(self._config.max_value))
        self._vitals = VitalsEngine(self._state.vitals, self._timers, self._config)
        self._vitals.on_died(self._on_died)
        # Every game replays the same blink schedule for a given seed.
        hold = self._hold_provider
        if hold is None:
            hold = random_hold(self._config, random.Random(self._seed))
        self._animation = AnimationScheduler(
            self._state.animation,
            self._timers,
            self._config,
            hold,
        )

    def _enter_playing(self) -> None:
        self._animation.reset()
        self._disposers = [self._vitals.start(), self._animation.stop]
        self._phase = Phase.PLAYING
        logger.info("session playing (seed=%d)", self._seed)
        self.bus.publish("started")
        self.bus.flush()

    def _dispose(self) -> None:
        disposers, self._disposers = self._disposers, []
        for dispose in disposers:
            dispose()

    def _on_died(self, cause: Stat) -> None:
        self._dispose()
        self._animation.enter_dead()
        self._phase = Phase.GAME_OVER
        self._state.is_game_over = True
        self._state.last_message = DEATH_MESSAGES[cause]
        logger.info("game over: %s", cause.value)
        self.bus.publish("died", cause=cause.value, message=self._state.last_message)
        self.bus.flush()

    def _publish_command(
        self, text: str, command: Command | None, accepted: bool
    ) -> None:
        self.bus.publish(
            "command",
            text=text,
            command=command.value if command is not None else None,
            accepted=accepted,
            message=self._state.last_message,
        )
        self.bus.flush()

    def _record(self, signal_name: str, data: dict[str, Any]) -> None:
        self.log.emit(self._timers.now_ms, signal_name, **data)
