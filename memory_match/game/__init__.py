"""Game logic."""

from .engine import GameEngine, InvalidCardError
from .scheduler import ManualScheduler, Scheduler, ThreadingScheduler

__all__ = [
    "GameEngine",
    "InvalidCardError",
    "ManualScheduler",
    "Scheduler",
    "ThreadingScheduler",
]
