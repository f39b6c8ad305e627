"""Game state model for Wood & Steel."""

import logging
from dataclasses import dataclass, field
from enum import Enum

from .contract import Contract, ContractType
from .player import Player
from .railroad import IndependentRailroad


class GamePhase(Enum):
    """Phases of the game."""

    WAITING_FOR_PLAYERS = "waiting_for_players"  # BYOD only
    SETUP = "setup"
    PLAY = "play"
    SCORING = "scoring"


class GameMode(Enum):
    """How the game is being played."""

    HOTSEAT = "hotseat"  # One shared device
    BYOD = "byod"  # Bring your own device


MIN_PLAYERS = 1
MAX_PLAYERS = 6


@dataclass
class GameState:
    """Mutable game state (contracts, players and independent railroads).

    Attributes:
        contracts: All contracts, newest first.
        players: Players in seat order.
        independent_railroads: Railroad name to IndependentRailroad.
        byod_game_started: Set when the host of a BYOD game starts it.
    """

    contracts: list[Contract] = field(default_factory=list)
    players: list[Player] = field(default_factory=list)
    independent_railroads: dict[str, IndependentRailroad] = field(
        default_factory=dict
    )
    byod_game_started: bool = False

    def get_player(self, player_id: str) -> Player | None:
        """Find a player by ID."""
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def get_contract(self, contract_id: str) -> Contract | None:
        """Find a contract by ID."""
        for contract in self.contracts:
            if contract.id == contract_id:
                return contract
        return None

    def add_contract(self, contract: Contract) -> None:
        """Add a contract to the front of the contract list."""
        self.contracts.insert(0, contract)

    def remove_contract(self, contract_id: str) -> Contract | None:
        """Remove a contract by ID and return it."""
        contract = self.get_contract(contract_id)
        if contract is not None:
            self.contracts.remove(contract)
        return contract

    def all_active_cities(self) -> list[str]:
        """Active cities of every player, without duplicates, in seat order."""
        seen: dict[str, None] = {}
        for player in self.players:
            for city in player.active_cities:
                seen.setdefault(city, None)
        return list(seen)

    def live_contract_keys(self) -> set[str]:
        """Commodity|destination keys of all unfulfilled contracts."""
        return {c.key for c in self.contracts if not c.fulfilled}

    def players_with_contracts(self) -> set[str]:
        """IDs of players holding at least one contract."""
        return {c.player_id for c in self.contracts if c.player_id is not None}

    def market_contracts(self) -> list[Contract]:
        """All market contracts."""
        return [c for c in self.contracts if c.type == ContractType.MARKET]


@dataclass
class GameContext:
    """Turn and phase bookkeeping.

    Attributes:
        phase: Current game phase.
        current_player: ID of the player whose turn it is.
        num_players: Total number of players.
        play_order: Player IDs in turn order.
        play_order_pos: Index into play_order for the current player.
        turn: Number of completed rounds.
    """

    phase: GamePhase = GamePhase.SETUP
    current_player: str = "0"
    num_players: int = 2
    play_order: list[str] = field(default_factory=list)
    play_order_pos: int = 0
    turn: int = 0

    def __post_init__(self) -> None:
        """Default the play order to seats 0..n-1."""
        if not self.play_order:
            self.play_order = [str(i) for i in range(self.num_players)]

    @property
    def is_last_seat(self) -> bool:
        """Check if the current player is last in play order."""
        return self.play_order_pos == len(self.play_order) - 1


def create_initial_state(
    num_players: int = 2,
    game_mode: GameMode = GameMode.HOTSEAT,
    player_names: list[str] | None = None,
) -> tuple[GameState, GameContext]:
    """Create a fresh game state and context.

    Args:
        num_players: Number of seats.
        game_mode: Hotseat games start in setup, BYOD games wait for players.
        player_names: Optional display names, one per seat.

    Returns:
        Tuple of (state, context).
    """
    if not MIN_PLAYERS <= num_players <= MAX_PLAYERS:
        raise ValueError(f"Invalid player count: {num_players}")
    if player_names is not None and len(player_names) != num_players:
        raise ValueError(
            f"Expected {num_players} player names, got {len(player_names)}"
        )

    players = [
        Player(id=str(i), name=player_names[i] if player_names else f"Player {i}")
        for i in range(num_players)
    ]
    state = GameState(players=players)
    phase = (
        GamePhase.WAITING_FOR_PLAYERS
        if game_mode == GameMode.BYOD
        else GamePhase.SETUP
    )
    ctx = GameContext(phase=phase, current_player="0", num_players=num_players)
    logging.getLogger(__name__).info(
        f"Created {game_mode.value} game state with {num_players} players, phase {phase.value}"
    )
    return state, ctx
