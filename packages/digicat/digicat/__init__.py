"""digicat - A virtual pet driven by decay timers and text commands."""

from digicat.animation import AnimationScheduler, AnimationState
from digicat.clock import Clock
from digicat.commands import Command, CommandInterpreter
from digicat.config import CANONICAL, REDUCED, PetConfig
from digicat.events import Event, EventLog
from digicat.session import DisplayState, Session, SessionState
from digicat.signals import SignalBus
from digicat.timers import TimerHandle, TimerService
from digicat.types import AnimMode, FrameId, Phase, Stat
from digicat.vitals import VitalsEngine, VitalStats

__all__ = [
    "Session",
    "SessionState",
    "DisplayState",
    "PetConfig",
    "CANONICAL",
    "REDUCED",
    "Clock",
    "TimerService",
    "TimerHandle",
    "VitalsEngine",
    "VitalStats",
    "AnimationScheduler",
    "AnimationState",
    "Command",
    "CommandInterpreter",
    "SignalBus",
    "EventLog",
    "Event",
    "Stat",
    "AnimMode",
    "FrameId",
    "Phase",
]
