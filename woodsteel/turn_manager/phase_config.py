"""Phase structure, transitions and end-of-turn hooks for Wood & Steel."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from woodsteel.engine.independent_railroads import grow_independent_railroads
from woodsteel.engine.randomness import GameRandom
from woodsteel.models.game_state import GameContext, GamePhase, GameState

logger = logging.getLogger(__name__)

PhaseHook = Callable[[GameState, GameContext, GameRandom | None], None]
EndCondition = Callable[[GameState, GameContext], bool]


def _never(state: GameState, ctx: GameContext) -> bool:
    return False


@dataclass(frozen=True)
class PhaseConfig:
    """How a single phase behaves.

    Attributes:
        next: Phase to move to once end_if holds.
        end_if: Condition ending the phase.
        on_end: Hook run just before leaving the phase.
        turn_on_end: Hook run whenever a turn ends in this phase.
    """

    next: GamePhase
    end_if: EndCondition = _never
    on_end: PhaseHook | None = None
    turn_on_end: PhaseHook | None = None


def _byod_game_started(state: GameState, ctx: GameContext) -> bool:
    return state.byod_game_started


def _waiting_on_end(
    state: GameState, ctx: GameContext, rng: GameRandom | None
) -> None:
    logger.info(f"All {ctx.num_players} players joined, starting game setup")


def _every_player_has_contract(state: GameState, ctx: GameContext) -> bool:
    return len(state.players_with_contracts()) >= ctx.num_players


def _setup_on_end(
    state: GameState, ctx: GameContext, rng: GameRandom | None
) -> None:
    logger.info("Setup phase complete, starting main game")


def _grow_after_last_seat(
    state: GameState, ctx: GameContext, rng: GameRandom | None
) -> None:
    # Once per round, after the last seat's turn
    if not ctx.is_last_seat:
        return
    added = grow_independent_railroads(state, rng)
    if added:
        logger.info(f"Independent railroads added routes: {sorted(added)}")


PHASE_CONFIG: dict[GamePhase, PhaseConfig] = {
    # BYOD only; hotseat games start in setup
    GamePhase.WAITING_FOR_PLAYERS: PhaseConfig(
        next=GamePhase.SETUP,
        end_if=_byod_game_started,
        on_end=_waiting_on_end,
    ),
    # Each player picks starting cities and gets a starting contract
    GamePhase.SETUP: PhaseConfig(
        next=GamePhase.PLAY,
        end_if=_every_player_has_contract,
        on_end=_setup_on_end,
    ),
    GamePhase.PLAY: PhaseConfig(
        next=GamePhase.SCORING,
        turn_on_end=_grow_after_last_seat,
    ),
    # Not implemented yet; loops on itself
    GamePhase.SCORING: PhaseConfig(next=GamePhase.SCORING),
}


def get_phase_config(phase: GamePhase) -> PhaseConfig | None:
    """Get the configuration for a phase."""
    return PHASE_CONFIG.get(phase)


def execute_phase_on_end(
    phase: GamePhase,
    state: GameState,
    ctx: GameContext,
    rng: GameRandom | None = None,
) -> None:
    """Run the phase's on_end hook if it has one."""
    config = get_phase_config(phase)
    if config is not None and config.on_end is not None:
        config.on_end(state, ctx, rng)


def execute_turn_on_end(
    phase: GamePhase,
    state: GameState,
    ctx: GameContext,
    rng: GameRandom | None = None,
) -> None:
    """Run the phase's turn_on_end hook if it has one."""
    config = get_phase_config(phase)
    if config is not None and config.turn_on_end is not None:
        config.turn_on_end(state, ctx, rng)
