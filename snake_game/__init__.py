"""Classic Snake on a wrap-around grid, built on pygame."""

from .engine import EventKind, GameEngine, GameEvent
from .food import Food
from .models import Direction, GameState, Position
from .snake import Snake
from .sound import SoundService

__version__ = "1.0.0"

__all__ = [
    "Direction",
    "EventKind",
    "Food",
    "GameEngine",
    "GameEvent",
    "GameState",
    "Position",
    "Snake",
    "SoundService",
]
