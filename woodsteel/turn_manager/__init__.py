"""Turn management for Wood & Steel."""

from .turn_manager import TurnManager
from .move_validator import MOVES_BY_PHASE, MoveValidator
from .phase_config import PHASE_CONFIG, PhaseConfig, get_phase_config

__all__ = [
    "TurnManager",
    "MoveValidator",
    "MOVES_BY_PHASE",
    "PHASE_CONFIG",
    "PhaseConfig",
    "get_phase_config",
]
