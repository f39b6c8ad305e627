"""Turn manager for Wood & Steel game flow control."""

import logging
from typing import Any

from woodsteel.engine.randomness import GameRandom
from woodsteel.models.game_state import GameContext, GameState

from .phase_config import execute_phase_on_end, execute_turn_on_end, get_phase_config

logger = logging.getLogger(__name__)


class TurnManager:
    """Manages turn order and phase transitions.

    Attributes:
        state: Reference to game state.
        ctx: Reference to game context.
        rng: Random source passed to phase hooks.
    """

    def __init__(
        self, state: GameState, ctx: GameContext, rng: GameRandom | None = None
    ) -> None:
        """Initialize turn manager.

        Args:
            state: The game state to manage.
            ctx: The game context to advance.
            rng: Random source for end-of-turn hooks.
        """
        self.state = state
        self.ctx = ctx
        self.rng = rng

    def get_current_player_id(self) -> str | None:
        """Get the ID of the current player.

        Returns:
            Current player ID or None if play order is empty.
        """
        if not self.ctx.play_order:
            return None
        return self.ctx.current_player

    def is_player_turn(self, player_id: str) -> bool:
        """Check if it's a specific player's turn."""
        return self.get_current_player_id() == player_id

    def end_turn(self) -> str | None:
        """End the current player's turn.

        Runs the phase's turn_on_end hook, then moves to the next seat in
        play order. The turn counter increments when play wraps to seat 0.

        Returns:
            ID of the new current player.
        """
        if not self.ctx.play_order:
            logger.error("Cannot end turn: play order is empty")
            return None

        execute_turn_on_end(self.ctx.phase, self.state, self.ctx, self.rng)

        next_pos = (self.ctx.play_order_pos + 1) % len(self.ctx.play_order)
        next_turn = self.ctx.turn + 1 if next_pos == 0 else self.ctx.turn
        next_player = self.ctx.play_order[next_pos]

        self.ctx.play_order_pos = next_pos
        self.ctx.turn = next_turn
        self.ctx.current_player = next_player

        logger.debug(f"Turn {next_turn}: player {next_player} to move")
        return next_player

    def check_phase_transition(self) -> bool:
        """Advance to the next phase if the current one has ended.

        Returns:
            True if a phase transition occurred.
        """
        config = get_phase_config(self.ctx.phase)
        if config is None:
            logger.warning(f"Unknown phase: {self.ctx.phase}")
            return False

        if not config.end_if(self.state, self.ctx):
            return False

        previous = self.ctx.phase
        if config.next == previous:
            return False

        execute_phase_on_end(previous, self.state, self.ctx, self.rng)
        self.ctx.phase = config.next

        logger.info(f"Phase transition: {previous.value} -> {config.next.value}")
        return True

    def get_turn_info(self) -> dict[str, Any]:
        """Get information about the current turn.

        Returns:
            Dictionary with turn information.
        """
        player = self.state.get_player(self.ctx.current_player)
        return {
            "phase": self.ctx.phase.value,
            "turn": self.ctx.turn,
            "current_player": {
                "id": player.id if player else None,
                "name": player.name if player else None,
            },
            "play_order": list(self.ctx.play_order),
            "play_order_pos": self.ctx.play_order_pos,
        }
