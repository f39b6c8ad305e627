"""Repository for game data persistence."""

import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy.orm import Session

from woodsteel.models.game_state import GameContext, GameState

from .models import GameModel
from .serialization import deserialize_state, serialize_state


class GameRepository:
    """Repository for saving and loading game state by game code.

    Attributes:
        session: SQLAlchemy database session.
    """

    def __init__(self, session: Session) -> None:
        """Initialize repository.

        Args:
            session: Database session.
        """
        self.session = session
        self.logger = logging.getLogger(__name__)

    def get_game(self, code: str) -> GameModel | None:
        """Get a game record by code."""
        return self.session.query(GameModel).filter_by(code=code).first()

    def game_exists(self, code: str) -> bool:
        """Check if a game with this code has been saved."""
        return self.get_game(code) is not None

    def save_game(
        self,
        code: str,
        state: GameState,
        ctx: GameContext,
        game_mode: str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> GameModel:
        """Save complete game state, creating the record if needed.

        Args:
            code: Game code.
            state: Game state to save.
            ctx: Game context to save.
            game_mode: 'hotseat' or 'byod'; kept from the existing record
                when None.
            metadata: Metadata to store; kept from the existing record when
                None. last_modified is always refreshed.

        Returns:
            Game database model.
        """
        self.logger.info(f"Saving game state for game {code}")

        game = self.get_game(code)
        if not game:
            self.logger.debug(f"Game {code} not found, creating new game record")
            game = GameModel(
                code=code,
                game_mode=game_mode or "hotseat",
                state_json="{}",
                metadata_json="{}",
            )
            self.session.add(game)

        if game_mode is not None:
            game.game_mode = game_mode
        game.phase = ctx.phase.value
        game.turn = ctx.turn
        game.num_players = ctx.num_players
        game.state = serialize_state(state, ctx)

        merged = dict(metadata) if metadata is not None else game.game_metadata
        merged["last_modified"] = datetime.now(timezone.utc).isoformat()
        merged["game_mode"] = game.game_mode
        game.game_metadata = merged

        self.session.commit()
        self.logger.info(
            f"Successfully saved game {code} in phase {ctx.phase.value} "
            f"with {len(state.players)} players and {len(state.contracts)} contracts"
        )
        return game

    def load_game(self, code: str) -> tuple[GameState, GameContext] | None:
        """Load game state by code.

        Returns:
            Tuple of (state, context), or None if not found or unreadable.
        """
        game = self.get_game(code)
        if not game:
            return None
        try:
            return deserialize_state(game.state)
        except ValueError as e:
            self.logger.error(f"Stored state for game {code} is invalid: {e}")
            return None

    def list_games(self) -> list[dict[str, Any]]:
        """Summaries of all saved games, most recently modified first."""
        games = self.session.query(GameModel).order_by(GameModel.updated_at.desc()).all()
        return [
            {
                "code": game.code,
                "game_mode": game.game_mode,
                "phase": game.phase,
                "turn": game.turn,
                "num_players": game.num_players,
                "last_modified": game.game_metadata.get("last_modified"),
            }
            for game in games
        ]

    def get_game_metadata(self, code: str) -> dict[str, Any] | None:
        """Get a game's metadata, or None if not found."""
        game = self.get_game(code)
        if not game:
            return None
        return game.game_metadata

    def update_game_metadata(self, code: str, updates: dict[str, Any]) -> bool:
        """Merge updates into a game's metadata.

        Returns:
            True if updated, False if not found.
        """
        game = self.get_game(code)
        if not game:
            return False
        merged = game.game_metadata
        merged.update(updates)
        game.game_metadata = merged
        self.session.commit()
        return True

    def delete_game(self, code: str) -> bool:
        """Delete a game.

        Returns:
            True if deleted, False if not found.
        """
        game = self.get_game(code)
        if not game:
            return False

        self.session.delete(game)
        self.session.commit()
        return True
