"""Game engine for Wood & Steel."""

from .randomness import GameRandom
from .graph import ConnectionOptions, cities_connected_to, shortest_distance
from .contracts import money_value, new_contract, railroad_tie_value
from .independent_railroads import (
    grow_independent_railroads,
    initialize_independent_railroads,
)
from .game_engine import GameEngine, GamePersistence

__all__ = [
    "GameRandom",
    "ConnectionOptions",
    "cities_connected_to",
    "shortest_distance",
    "money_value",
    "new_contract",
    "railroad_tie_value",
    "grow_independent_railroads",
    "initialize_independent_railroads",
    "GameEngine",
    "GamePersistence",
]
