"""Game models for Wood & Steel."""

from .city import City, Commodity, Route, REGION_CODES
from .contract import Contract, ContractType, PrivateContractSpec
from .game_state import (
    GameContext,
    GameMode,
    GamePhase,
    GameState,
    create_initial_state,
)
from .player import Player
from .railroad import IndependentRailroad

__all__ = [
    "City",
    "Commodity",
    "Route",
    "REGION_CODES",
    "Contract",
    "ContractType",
    "PrivateContractSpec",
    "GameContext",
    "GameMode",
    "GamePhase",
    "GameState",
    "create_initial_state",
    "Player",
    "IndependentRailroad",
]
