"""Shared enums and type aliases for the pet simulation."""

from __future__ import annotations

from enum import Enum
from typing import Callable

TimerCallback = Callable[[], None]

# Zero-argument callable that releases whatever a start()-like call acquired.
Disposer = Callable[[], None]


class Stat(str, Enum):
    """A vital stat. Also used as the cause of death."""

    HUNGER = "hunger"
    HAPPINESS = "happiness"


class AnimMode(str, Enum):
    IDLE = "idle"
    BLINKING = "blinking"
    DEAD = "dead"
    DANCING = "dancing"


class FrameId(str, Enum):
    OPEN = "open"
    BLINK = "blink"
    DEAD = "dead"
    DANCE_RIGHT = "dance_right"
    DANCE_LEFT = "dance_left"


class Phase(str, Enum):
    """Session controller phases."""

    STOPPED = "stopped"
    PLAYING = "playing"
    GAME_OVER = "game_over"


# Frames each animation mode cycles through, in display order.
MODE_FRAMES: dict[AnimMode, tuple[FrameId, ...]] = {
    AnimMode.IDLE: (FrameId.OPEN,),
    AnimMode.BLINKING: (FrameId.BLINK,),
    AnimMode.DEAD: (FrameId.DEAD,),
    AnimMode.DANCING: (FrameId.DANCE_RIGHT, FrameId.DANCE_LEFT),
}
