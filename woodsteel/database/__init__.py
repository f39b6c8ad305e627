"""Database layer for Wood & Steel persistence."""

from .base import Base, get_engine, get_session, init_db
from .game_manager import GameManager, is_valid_game_code, normalize_game_code
from .repository import GameRepository

__all__ = [
    "Base",
    "get_engine",
    "get_session",
    "init_db",
    "GameManager",
    "GameRepository",
    "is_valid_game_code",
    "normalize_game_code",
]
