"""Wood & Steel: rules engine for a railroad board-game companion."""

from .engine import GameEngine, GameRandom
from .models import GameContext, GameMode, GamePhase, GameState

__version__ = "0.1.0"

__all__ = [
    "GameEngine",
    "GameRandom",
    "GameContext",
    "GameMode",
    "GamePhase",
    "GameState",
]
