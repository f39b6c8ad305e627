"""Game manager: game codes and saved game lifecycle."""

import logging
import re
from datetime import datetime, timezone
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from woodsteel.engine.randomness import GameRandom, default_rng
from woodsteel.models.game_state import (
    GameContext,
    GameMode,
    GameState,
    create_initial_state,
)

from .repository import GameRepository

logger = logging.getLogger(__name__)

# Consonants only, so codes never spell words by accident
GAME_CODE_LETTERS = "BCDFGHJKLMNPQRSTVWXYZ"
GAME_CODE_LENGTH = 5
MAX_CODE_ATTEMPTS = 100

_VALID_CODE = re.compile(r"^[A-Z]{4,5}$")


def generate_game_code(rng: GameRandom | None = None) -> str:
    """Random five-consonant game code."""
    rng = rng or default_rng()
    return "".join(
        rng.random_array_item(GAME_CODE_LETTERS) for _ in range(GAME_CODE_LENGTH)
    )


def normalize_game_code(code: str | None) -> str:
    """Upper-case and strip a game code."""
    return code.strip().upper() if code else ""


def is_valid_game_code(code: str | None) -> bool:
    """Check that a code is 4 or 5 letters (case-insensitive)."""
    if not code:
        return False
    return bool(_VALID_CODE.match(normalize_game_code(code)))


class GameManager:
    """Creates, saves and loads games by code.

    Implements the persistence interface GameEngine saves through.

    Attributes:
        repository: Game repository bound to a database session.
        rng: Random source for game codes.
    """

    def __init__(self, session: Session, rng: GameRandom | None = None) -> None:
        """Initialize game manager.

        Args:
            session: Database session.
            rng: Random source for game codes.
        """
        self.repository = GameRepository(session)
        self.rng = rng or default_rng()
        self._current_code: str | None = None

    # Current game

    def get_current_game_code(self) -> str | None:
        """Code of the game currently being played, if any."""
        return self._current_code

    def set_current_game_code(self, code: str) -> None:
        """Set the current game code.

        Raises:
            ValueError: If the code is malformed.
        """
        if not is_valid_game_code(code):
            raise ValueError(f"Invalid game code format: {code}")
        self._current_code = normalize_game_code(code)

    def switch_to_game(self, code: str) -> bool:
        """Make an existing saved game current.

        Returns:
            True if switched, False if the code is invalid or unknown.
        """
        if not is_valid_game_code(code):
            logger.error(f"Invalid game code format: {code}")
            return False
        normalized = normalize_game_code(code)
        if not self.game_exists(normalized):
            logger.warning(f"Game not found: {normalized}")
            return False
        self._current_code = normalized
        return True

    # Codes

    def list_game_codes(self) -> list[str]:
        """Sorted codes of all saved games."""
        return sorted(game["code"] for game in self.list_games())

    def generate_unique_game_code(self) -> str:
        """Game code not used by any saved game.

        Raises:
            RuntimeError: If no unused code is found in MAX_CODE_ATTEMPTS.
        """
        existing = set(self.list_game_codes())
        for _ in range(MAX_CODE_ATTEMPTS):
            code = generate_game_code(self.rng)
            if code not in existing:
                return code
        raise RuntimeError(
            f"Failed to generate unique game code after {MAX_CODE_ATTEMPTS} attempts"
        )

    # Lifecycle

    def create_new_game(
        self,
        game_mode: GameMode | str = GameMode.HOTSEAT,
        num_players: int = 3,
        host_device_id: str | None = None,
        state: GameState | None = None,
        ctx: GameContext | None = None,
    ) -> str:
        """Create and save a new game, and make it current.

        Args:
            game_mode: 'hotseat' or 'byod'.
            num_players: Number of seats.
            host_device_id: Device of the BYOD host; required for BYOD.
            state: Initial state; a fresh one is created when None.
            ctx: Initial context; a fresh one is created when None.

        Returns:
            The new game code.

        Raises:
            ValueError: For an invalid mode or a BYOD game without a host.
        """
        try:
            mode = GameMode(game_mode)
        except ValueError:
            raise ValueError(
                f"Invalid game mode: {game_mode}. Must be 'hotseat' or 'byod'."
            ) from None
        if mode == GameMode.BYOD and not host_device_id:
            raise ValueError("BYOD games require a host_device_id")

        if state is None or ctx is None:
            state, ctx = create_initial_state(num_players, mode)

        code = self.generate_unique_game_code()
        metadata: dict[str, Any] = {"game_mode": mode.value}
        if mode == GameMode.BYOD:
            metadata["host_device_id"] = host_device_id
            metadata["player_seats"] = {
                host_device_id: {
                    "joined_at": datetime.now(timezone.utc).isoformat(),
                    "player_name": "Host",
                }
            }

        self.repository.save_game(code, state, ctx, mode.value, metadata)
        self._current_code = code
        logger.info(
            f"Created new game with code {code} (mode: {mode.value}, players: {ctx.num_players})"
        )
        return code

    def save_game_state(self, code: str, state: GameState, ctx: GameContext) -> bool:
        """Save game state under a code.

        Returns:
            True if saved, False on an invalid code or database error.
        """
        if not is_valid_game_code(code):
            logger.error(f"Invalid game code format: {code}")
            return False
        normalized = normalize_game_code(code)
        try:
            self.repository.save_game(normalized, state, ctx)
        except SQLAlchemyError as e:
            self.repository.session.rollback()
            logger.error(f"Failed to save game {normalized}: {e}")
            return False
        return True

    def load_game_state(self, code: str) -> tuple[GameState, GameContext] | None:
        """Load a saved game.

        Returns:
            Tuple of (state, context), or None if invalid, missing or
            unreadable.
        """
        if not is_valid_game_code(code):
            logger.error(f"Invalid game code format: {code}")
            return None
        normalized = normalize_game_code(code)
        try:
            return self.repository.load_game(normalized)
        except SQLAlchemyError as e:
            logger.error(f"Failed to load game {normalized}: {e}")
            return None

    def delete_game(self, code: str) -> bool:
        """Delete a saved game; clears the current code if it was current."""
        if not is_valid_game_code(code):
            logger.error(f"Invalid game code format: {code}")
            return False
        normalized = normalize_game_code(code)
        deleted = self.repository.delete_game(normalized)
        if deleted and self._current_code == normalized:
            self._current_code = None
        return deleted

    def game_exists(self, code: str) -> bool:
        """Check if a saved game exists for a code."""
        if not is_valid_game_code(code):
            return False
        return self.repository.game_exists(normalize_game_code(code))

    def list_games(self) -> list[dict[str, Any]]:
        """Summaries of saved games, most recently modified first."""
        return self.repository.list_games()

    def get_game_metadata(self, code: str) -> dict[str, Any] | None:
        """Metadata of a saved game, or None."""
        if not is_valid_game_code(code):
            return None
        return self.repository.get_game_metadata(normalize_game_code(code))
