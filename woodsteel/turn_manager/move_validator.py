"""Move validator for Wood & Steel."""

import logging

from woodsteel.models.game_state import GameContext, GamePhase

logger = logging.getLogger(__name__)

MOVES_BY_PHASE: dict[GamePhase, tuple[str, ...]] = {
    GamePhase.WAITING_FOR_PLAYERS: ("start_byod_game",),
    GamePhase.SETUP: ("generate_starting_contract",),
    GamePhase.PLAY: (
        "generate_private_contract",
        "generate_market_contract",
        "claim_market_contract",
        "add_contract",
        "toggle_contract_fulfilled",
        "delete_contract",
        "acquire_independent_railroad",
        "add_city_to_player",
        "claim_hub_city",
        "claim_regional_office",
        "end_turn",
    ),
    GamePhase.SCORING: (),
}


class MoveValidator:
    """Checks that moves are legal for the current phase and player.

    Attributes:
        ctx: Reference to the game context.
    """

    def __init__(self, ctx: GameContext) -> None:
        """Initialize move validator.

        Args:
            ctx: The game context to validate against.
        """
        self.ctx = ctx

    def is_move_allowed_in_phase(self, move_name: str) -> bool:
        """Check if a move is allowed in the current phase."""
        allowed = MOVES_BY_PHASE.get(self.ctx.phase)
        if allowed is None:
            logger.warning(f"Unknown phase: {self.ctx.phase}")
            return False
        return move_name in allowed

    def validate_move(
        self, move_name: str, player_id: str | None = None
    ) -> tuple[bool, str]:
        """Validate a move.

        Args:
            move_name: Name of the move being attempted.
            player_id: Acting player, if known. Must be the current player.

        Returns:
            Tuple of (is_valid, error_message).
        """
        if not move_name:
            return self._reject("Move name required")

        if not self.is_move_allowed_in_phase(move_name):
            return self._reject(
                f'Move "{move_name}" is not allowed in phase "{self.ctx.phase.value}"'
            )

        if player_id is None:
            return True, ""

        if not self.ctx.current_player:
            return self._reject("No current player")

        if player_id != self.ctx.current_player:
            return self._reject(
                f'Move "{move_name}" attempted by player "{player_id}" but current '
                f'player is "{self.ctx.current_player}"'
            )

        return True, ""

    def get_allowed_moves(self) -> list[str]:
        """Get the moves allowed in the current phase."""
        return list(MOVES_BY_PHASE.get(self.ctx.phase, ()))

    def _reject(self, reason: str) -> tuple[bool, str]:
        logger.warning(reason)
        return False, reason
