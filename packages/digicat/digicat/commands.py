"""Command parsing and dispatch for user text."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from digicat.animation import AnimationScheduler
from digicat.config import PetConfig
from digicat.types import Stat
from digicat.vitals import VitalsEngine

logger = logging.getLogger(__name__)


class Command(str, Enum):
    FEED = "feed"
    PET = "pet"
    DANCE = "dance"
    UNKNOWN = "unknown"
    EMPTY = "empty"


Handler = Callable[[VitalsEngine, AnimationScheduler], str | None]

FED_MESSAGE = "You fed your cat."
PET_MESSAGE = "You pet your cat."
DANCE_MESSAGE = "Your cat is dancing!"


def format_choices(words: tuple[str, ...] | list[str]) -> str:
    """Quote and join words as an English list.

    >>> format_choices(("feed", "pet", "dance"))
    '"feed", "pet", or "dance"'
    """
    quoted = [f'"{w}"' for w in words]
    if len(quoted) <= 1:
        return "".join(quoted)
    if len(quoted) == 2:
        return f"{quoted[0]} or {quoted[1]}"
    return ", ".join(quoted[:-1]) + f", or {quoted[-1]}"


class CommandInterpreter:
    """Parses text into Commands and routes them to one handler each.

    ``handler(vitals, animation) -> message`` returns the text to show, or
    None to leave the current message untouched.
    """

    def __init__(self, config: PetConfig) -> None:
        self._config = config
        self._handlers: dict[Command, Handler] = {}
        self.handle(Command.FEED, self._feed)
        self.handle(Command.PET, self._pet)
        if config.dance_enabled:
            self.handle(Command.DANCE, self._dance)
        self.handle(Command.UNKNOWN, self._unknown)
        self.handle(Command.EMPTY, lambda vitals, animation: None)

    @property
    def unknown_message(self) -> str:
        return f"Unknown command. Try {format_choices(self._config.commands)}."

    def handle(self, command: Command, handler: Handler) -> None:
        """Register *handler* for *command*. Later calls overwrite."""
        self._handlers[command] = handler

    def parse(self, raw_text: str) -> Command:
        word = raw_text.strip().lower()
        if not word:
            return Command.EMPTY
        if word in self._config.commands:
            return Command(word)
        return Command.UNKNOWN

    def dispatch(
        self,
        command: Command,
        vitals: VitalsEngine,
        animation: AnimationScheduler,
    ) -> str | None:
        """Apply *command*. Returns the new message, or None for no change.

        Raises ``TypeError`` if no handler is registered for *command*.
        """
        handler = self._handlers.get(command)
        if handler is None:
            raise TypeError(f"No handler registered for {command.value!r}")
        if vitals.is_dead:
            return None
        logger.debug("dispatching %s", command.value)
        return handler(vitals, animation)

    # -- default handlers --

    def _feed(self, vitals: VitalsEngine, animation: AnimationScheduler) -> str:
        vitals.adjust(Stat.HUNGER, self._config.feed_amount)
        return FED_MESSAGE

    def _pet(self, vitals: VitalsEngine, animation: AnimationScheduler) -> str:
        vitals.adjust(Stat.HAPPINESS, self._config.pet_amount)
        return PET_MESSAGE

    def _dance(self, vitals: VitalsEngine, animation: AnimationScheduler) -> str:
        vitals.fill(Stat.HAPPINESS)
        vitals.adjust(Stat.HUNGER, -self._config.dance_hunger_cost)
        animation.enter_dancing()
        return DANCE_MESSAGE

    def _unknown(self, vitals: VitalsEngine, animation: AnimationScheduler) -> str:
        return self.unknown_message
