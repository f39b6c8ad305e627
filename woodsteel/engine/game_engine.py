"""Game engine for Wood & Steel."""

import logging
from typing import Any, Protocol

from woodsteel.data import REFERENCE_DATA, ReferenceData
from woodsteel.models.city import REGION_CODES
from woodsteel.models.contract import Contract, ContractType, PrivateContractSpec
from woodsteel.models.game_state import (
    GameContext,
    GameMode,
    GamePhase,
    GameState,
    create_initial_state,
)
from woodsteel.models.player import Player
from woodsteel.turn_manager import MoveValidator, TurnManager

from .contracts import (
    generate_private_contract,
    generate_private_contract_offers,
    generate_starting_contract,
    generate_unique_market_contract,
    money_value,
    new_contract,
    railroad_tie_value,
)
from .graph import cities_on_routes
from .independent_railroads import initialize_independent_railroads
from .randomness import GameRandom, default_rng

logger = logging.getLogger(__name__)


class GamePersistence(Protocol):
    """Storage collaborator the engine saves to after every move."""

    def get_current_game_code(self) -> str | None: ...

    def save_game_state(
        self, code: str, state: GameState, ctx: GameContext
    ) -> bool: ...


class GameEngine:
    """Main game engine: validates moves, applies them and advances phases.

    Every move returns a result dictionary with a "success" flag and either
    a "message" or an "error". Rejected moves never mutate state.

    Attributes:
        state: The current game state.
        ctx: The current game context.
        game_mode: Hotseat or BYOD.
        rng: Random source for every draw the engine makes.
        persistence: Optional storage collaborator.
    """

    def __init__(
        self,
        num_players: int = 2,
        game_mode: GameMode = GameMode.HOTSEAT,
        player_names: list[str] | None = None,
        rng: GameRandom | None = None,
        persistence: GamePersistence | None = None,
        state: GameState | None = None,
        ctx: GameContext | None = None,
        data: ReferenceData = REFERENCE_DATA,
    ) -> None:
        """Initialize a game engine.

        A fresh game is created and set up unless both state and ctx are
        given, in which case the engine resumes that game.

        Args:
            num_players: Number of seats for a fresh game.
            game_mode: Hotseat or BYOD.
            player_names: Optional display names for a fresh game.
            rng: Random source; defaults to the shared generator.
            persistence: Optional storage collaborator.
            state: Existing game state to resume.
            ctx: Existing game context to resume.
            data: Reference data.
        """
        if not isinstance(game_mode, GameMode):
            raise ValueError(f"Invalid game mode: {game_mode}")

        self.game_mode = game_mode
        self.rng = rng or default_rng()
        self.persistence = persistence
        self.data = data

        if state is not None and ctx is not None:
            self.state, self.ctx = state, ctx
        else:
            self.state, self.ctx = create_initial_state(
                num_players, game_mode, player_names
            )
            self.setup_game()

        self.validator = MoveValidator(self.ctx)
        self.turn_manager = TurnManager(self.state, self.ctx, self.rng)

    def setup_game(self) -> None:
        """Seed independent railroads if the game has none yet."""
        if self.state.independent_railroads:
            return
        self.state.independent_railroads = initialize_independent_railroads(
            self.rng, self.data
        )

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    def get_current_player(self) -> Player | None:
        """Get the player whose turn it is."""
        return self.state.get_player(self.ctx.current_player)

    def is_my_turn(self, player_id: str) -> bool:
        """Check if it's a specific player's turn."""
        return self.turn_manager.is_player_turn(player_id)

    def get_player_contracts(self, player_id: str | None = None) -> list[Contract]:
        """Contracts held by a player (defaults to the current player)."""
        player_id = player_id if player_id is not None else self.ctx.current_player
        return [c for c in self.state.contracts if c.player_id == player_id]

    def get_market_contracts(self) -> list[Contract]:
        """Unclaimed market contracts, newest first."""
        return [c for c in self.state.market_contracts() if c.player_id is None]

    def get_player_active_cities(self, player_id: str | None = None) -> list[str]:
        """Active cities of a player (defaults to the current player)."""
        player_id = player_id if player_id is not None else self.ctx.current_player
        player = self.state.get_player(player_id)
        return list(player.active_cities) if player else []

    def get_private_contract_offers(
        self, count: int | None = None
    ) -> list[PrivateContractSpec]:
        """Private contract specs the current player may choose from."""
        return generate_private_contract_offers(
            self.state, self.ctx, self.rng, count, self.data
        )

    def get_available_moves(self) -> list[str]:
        """Names of the moves allowed in the current phase."""
        return self.validator.get_allowed_moves()

    def describe_contract(self, contract: Contract) -> dict[str, Any]:
        """Contract details with derived rewards."""
        return {
            "id": contract.id,
            "commodity": contract.commodity,
            "destination": contract.destination_key,
            "type": contract.type.value,
            "fulfilled": contract.fulfilled,
            "player_id": contract.player_id,
            "value": money_value(contract, self.data),
            "railroad_ties": railroad_tie_value(contract, self.data),
        }

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def start_byod_game(self) -> dict[str, Any]:
        """Host starts a BYOD game once everyone has joined."""
        rejected = self._validate("start_byod_game")
        if rejected:
            return rejected
        if self.game_mode != GameMode.BYOD:
            return self._fail("Only BYOD games wait for players")

        self.state.byod_game_started = True
        self._after_move()
        return {"success": True, "message": "Game started"}

    def generate_starting_contract(
        self, cities: list[str], player_id: str | None = None
    ) -> dict[str, Any]:
        """Choose starting cities and receive a starting contract.

        Ends the player's turn automatically.

        Args:
            cities: Keys of exactly two starting cities.
            player_id: Acting player; must be the current player if given.
        """
        rejected = self._validate("generate_starting_contract", player_id)
        if rejected:
            return rejected
        if not isinstance(cities, (list, tuple)) or len(cities) != 2:
            return self._fail("Starting cities must be a pair of city keys")
        if not all(isinstance(c, str) for c in cities):
            return self._fail("Starting cities must be city name strings")
        unknown = [c for c in cities if c not in self.data.cities]
        if unknown:
            return self._fail(f"Unknown cities: {', '.join(map(str, unknown))}")

        player = self.get_current_player()
        if not player:
            return self._fail(f"Current player {self.ctx.current_player} not found")

        contract = generate_starting_contract(
            self.state, list(cities), player.id, self.rng, self.data
        )
        if contract is None:
            return self._fail("Contract generation failed", log=logger.error)

        self.state.add_contract(contract)
        player.active_cities = list(cities)
        self.turn_manager.check_phase_transition()

        self.turn_manager.end_turn()
        self._save_current_game_state()

        return {
            "success": True,
            "message": f"{player.name} starts in {cities[0]} and {cities[1]}",
            "contract": contract,
        }

    def generate_private_contract(self) -> dict[str, Any]:
        """Give the current player a new private contract."""
        rejected = self._validate("generate_private_contract")
        if rejected:
            return rejected

        contract = generate_private_contract(self.state, self.ctx, self.rng, self.data)
        if contract is None:
            return self._fail("Contract generation failed", log=logger.error)

        self.state.add_contract(contract)
        self._after_move()
        return {
            "success": True,
            "message": f"New private contract: {contract.commodity} to {contract.destination_key}",
            "contract": contract,
        }

    def generate_market_contract(self) -> dict[str, Any]:
        """Add a market contract that doesn't duplicate a live contract."""
        rejected = self._validate("generate_market_contract")
        if rejected:
            return rejected

        contract = generate_unique_market_contract(self.state, self.rng, data=self.data)
        if contract is None:
            return self._fail("Contract generation failed", log=logger.error)

        self.state.add_contract(contract)
        self._after_move()
        return {
            "success": True,
            "message": f"New market contract: {contract.commodity} to {contract.destination_key}",
            "contract": contract,
        }

    def claim_market_contract(self, contract_id: str) -> dict[str, Any]:
        """Take an unclaimed market contract as the current player's own.

        The claimed contract becomes private to the claimant and a
        replacement market contract is generated when possible.
        """
        rejected = self._validate("claim_market_contract")
        if rejected:
            return rejected

        contract = self.state.get_contract(contract_id)
        if not contract:
            return self._fail(f'Contract "{contract_id}" not found')
        if not contract.is_market:
            return self._fail(f'Contract "{contract_id}" is not a market contract')
        if contract.player_id is not None or contract.fulfilled:
            return self._fail(f'Contract "{contract_id}" is already claimed')

        contract.type = ContractType.PRIVATE
        contract.player_id = self.ctx.current_player

        replacement = generate_unique_market_contract(
            self.state, self.rng, data=self.data
        )
        if replacement is not None:
            self.state.add_contract(replacement)

        self._after_move()
        return {
            "success": True,
            "message": f"Player {self.ctx.current_player} claimed {contract.key}",
            "contract": contract,
            "replacement": replacement,
        }

    def add_contract(
        self, commodity: str, destination_key: str, type: str = "private"
    ) -> dict[str, Any]:
        """Add a contract by hand.

        Private contracts go to the current player; market contracts stay
        unclaimed until fulfilled.
        """
        rejected = self._validate("add_contract")
        if rejected:
            return rejected
        if not isinstance(commodity, str) or not commodity:
            return self._fail("Commodity must be a non-empty string")
        if not isinstance(destination_key, str) or not destination_key:
            return self._fail("Destination must be a non-empty string")
        try:
            contract_type = ContractType(type)
        except ValueError:
            return self._fail('Type must be "private" or "market"')

        contract = new_contract(
            destination_key,
            commodity,
            type=contract_type,
            player_id=(
                self.ctx.current_player
                if contract_type == ContractType.PRIVATE
                else None
            ),
            data=self.data,
        )
        if contract is None:
            return self._fail("Contract creation failed", log=logger.error)

        self.state.add_contract(contract)
        self._after_move()
        return {
            "success": True,
            "message": f"Added {contract_type.value} contract: {commodity} to {destination_key}",
            "contract": contract,
        }

    def toggle_contract_fulfilled(self, contract_id: str) -> dict[str, Any]:
        """Mark a contract fulfilled, or undo that.

        The current player may toggle their own contracts and fulfill any
        unclaimed market contract. Fulfilling adds the destination to the
        player's active cities; undoing removes it unless another of their
        fulfilled contracts ends there.
        """
        rejected = self._validate("toggle_contract_fulfilled")
        if rejected:
            return rejected

        contract = self.state.get_contract(contract_id)
        if not contract:
            return self._fail(f'Contract "{contract_id}" not found')

        current = self.ctx.current_player
        can_toggle = contract.player_id == current or (
            contract.is_market and not contract.fulfilled
        )
        if not can_toggle:
            return self._fail(
                f'Contract "{contract_id}" cannot be toggled by player {current}'
            )

        player = self.state.get_player(current)
        if not player:
            return self._fail(f"Current player {current} not found", log=logger.error)

        contract.fulfilled = not contract.fulfilled
        if contract.is_market:
            contract.player_id = current if contract.fulfilled else None

        if contract.fulfilled:
            player.add_city(contract.destination_key)
        else:
            still_reached = any(
                c.id != contract.id
                and c.player_id == current
                and c.fulfilled
                and c.destination_key == contract.destination_key
                for c in self.state.contracts
            )
            if not still_reached:
                player.remove_city(contract.destination_key)

        self._after_move()
        state_word = "fulfilled" if contract.fulfilled else "unfulfilled"
        return {
            "success": True,
            "message": f"{contract.key} marked {state_word}",
            "contract": contract,
        }

    def delete_contract(self, contract_id: str) -> dict[str, Any]:
        """Delete an unfulfilled contract."""
        rejected = self._validate("delete_contract")
        if rejected:
            return rejected

        contract = self.state.get_contract(contract_id)
        if not contract:
            return self._fail(f'Contract "{contract_id}" not found')
        if contract.fulfilled:
            return self._fail(f'Cannot delete fulfilled contract "{contract_id}"')

        self.state.remove_contract(contract_id)
        self._after_move()
        return {"success": True, "message": f"Deleted {contract.key}"}

    def acquire_independent_railroad(self, railroad_name: str) -> dict[str, Any]:
        """Current player takes over an independent railroad and its cities."""
        rejected = self._validate("acquire_independent_railroad")
        if rejected:
            return rejected

        if not isinstance(railroad_name, str):
            return self._fail("Railroad name must be a string")

        railroad = self.state.independent_railroads.get(railroad_name)
        if not railroad:
            return self._fail(f'Railroad "{railroad_name}" not found')

        player = self.get_current_player()
        if not player:
            return self._fail(
                f"Current player {self.ctx.current_player} not found", log=logger.error
            )

        for city_key in sorted(cities_on_routes(railroad.routes, self.data)):
            player.add_city(city_key)
        del self.state.independent_railroads[railroad_name]

        self._after_move()
        return {
            "success": True,
            "message": f"{player.name} acquired {railroad_name}",
        }

    def add_city_to_player(self, city_key: str) -> dict[str, Any]:
        """Add a city to the current player's active cities."""
        rejected = self._validate("add_city_to_player")
        if rejected:
            return rejected
        if not isinstance(city_key, str):
            return self._fail("City must be a string")
        if city_key not in self.data.cities:
            return self._fail(f'City "{city_key}" not found')

        player = self.get_current_player()
        if not player:
            return self._fail(
                f"Current player {self.ctx.current_player} not found", log=logger.error
            )
        if not player.add_city(city_key):
            return self._fail(f'City "{city_key}" is already an active city')

        self._after_move()
        return {"success": True, "message": f"{player.name} now serves {city_key}"}

    def claim_hub_city(self, city_key: str) -> dict[str, Any]:
        """Current player makes a city their hub.

        A player has at most one hub, and a city can be the hub of only
        one player.
        """
        rejected = self._validate("claim_hub_city")
        if rejected:
            return rejected
        if not isinstance(city_key, str):
            return self._fail("City must be a string")
        if city_key not in self.data.cities:
            return self._fail(f'City "{city_key}" not found')

        player = self.get_current_player()
        if not player:
            return self._fail(
                f"Current player {self.ctx.current_player} not found", log=logger.error
            )
        if player.hub_city is not None:
            return self._fail(f"{player.name} already has a hub in {player.hub_city}")
        for other in self.state.players:
            if other.id != player.id and other.hub_city == city_key:
                return self._fail(f'City "{city_key}" is already the hub of {other.name}')

        player.hub_city = city_key
        self._after_move()
        return {"success": True, "message": f"{player.name} claimed {city_key} as hub"}

    def claim_regional_office(self, region: str) -> dict[str, Any]:
        """Current player opens a regional office.

        A player has at most one regional office, and no two players share
        a region.
        """
        rejected = self._validate("claim_regional_office")
        if rejected:
            return rejected
        if not isinstance(region, str) or region not in REGION_CODES:
            return self._fail(
                f'Region must be one of {", ".join(REGION_CODES)}, got "{region}"'
            )

        player = self.get_current_player()
        if not player:
            return self._fail(
                f"Current player {self.ctx.current_player} not found", log=logger.error
            )
        if player.regional_office is not None:
            return self._fail(
                f"{player.name} already has a regional office in {player.regional_office}"
            )
        for other in self.state.players:
            if other.id != player.id and other.regional_office == region:
                return self._fail(
                    f"{other.name} already has a regional office in {region}"
                )

        player.regional_office = region
        self._after_move()
        return {
            "success": True,
            "message": f"{player.name} opened a regional office in {region}",
        }

    def end_turn(self, player_id: str | None = None) -> dict[str, Any]:
        """End the current player's turn."""
        rejected = self._validate("end_turn", player_id)
        if rejected:
            return rejected

        next_player = self.turn_manager.end_turn()
        self._save_current_game_state()
        return {
            "success": True,
            "message": f"Player {next_player} to move",
            "current_player": next_player,
            "turn": self.ctx.turn,
        }

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _validate(
        self, move_name: str, player_id: str | None = None
    ) -> dict[str, Any] | None:
        is_valid, error = self.validator.validate_move(move_name, player_id)
        if is_valid:
            return None
        return {"success": False, "error": error}

    def _fail(self, error: str, log=logger.warning) -> dict[str, Any]:
        log(error)
        return {"success": False, "error": error}

    def _after_move(self) -> None:
        self.turn_manager.check_phase_transition()
        self._save_current_game_state()

    def _save_current_game_state(self) -> None:
        """Save to the persistence collaborator; failures never undo a move."""
        if self.persistence is None:
            return
        try:
            code = self.persistence.get_current_game_code()
            if code:
                self.persistence.save_game_state(code, self.state, self.ctx)
        except Exception as e:
            logger.error(f"Failed to save game state: {e}")

    @property
    def phase(self) -> GamePhase:
        """Current game phase."""
        return self.ctx.phase
