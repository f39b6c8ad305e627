"""SQLAlchemy models for database persistence."""

import json
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GameModel(Base):
    """Database model for a saved game, keyed by its game code."""

    __tablename__ = "games"

    code: Mapped[str] = mapped_column(String(8), primary_key=True)
    game_mode: Mapped[str] = mapped_column(String(16))  # hotseat, byod
    phase: Mapped[str] = mapped_column(String(32))
    turn: Mapped[int] = mapped_column(Integer, default=0)
    num_players: Mapped[int] = mapped_column(Integer, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=_utcnow, onupdate=_utcnow, index=True
    )

    # JSON fields for complex state
    state_json: Mapped[str] = mapped_column(Text, default="{}")
    metadata_json: Mapped[str] = mapped_column(Text, default="{}")

    @property
    def state(self) -> dict[str, Any]:
        """Get serialized state as dictionary."""
        return json.loads(self.state_json)

    @state.setter
    def state(self, value: dict[str, Any]) -> None:
        """Set serialized state from dictionary."""
        self.state_json = json.dumps(value)

    @property
    def game_metadata(self) -> dict[str, Any]:
        """Get metadata as dictionary."""
        return json.loads(self.metadata_json)

    @game_metadata.setter
    def game_metadata(self, value: dict[str, Any]) -> None:
        """Set metadata from dictionary."""
        self.metadata_json = json.dumps(value)
