"""Conversion of game state to and from JSON-friendly dictionaries."""

import json
from typing import Any

from woodsteel.models.contract import Contract, ContractType
from woodsteel.models.game_state import GameContext, GamePhase, GameState
from woodsteel.models.player import Player
from woodsteel.models.railroad import IndependentRailroad


def _contract_to_dict(contract: Contract) -> dict[str, Any]:
    return {
        "id": contract.id,
        "destination_key": contract.destination_key,
        "commodity": contract.commodity,
        "type": contract.type.value,
        "fulfilled": contract.fulfilled,
        "player_id": contract.player_id,
        "creation_time": contract.creation_time,
    }


def _player_to_dict(player: Player) -> dict[str, Any]:
    return {
        "id": player.id,
        "name": player.name,
        "active_cities": list(player.active_cities),
        "hub_city": player.hub_city,
        "regional_office": player.regional_office,
    }


def serialize_state(state: GameState, ctx: GameContext) -> dict[str, Any]:
    """Convert state and context to a plain dictionary.

    The result shares no mutable objects with its inputs and can be passed
    straight to json.dumps.

    Args:
        state: Game state.
        ctx: Game context.

    Returns:
        Dictionary with "state" and "ctx" keys.
    """
    return {
        "state": {
            "contracts": [_contract_to_dict(c) for c in state.contracts],
            "players": [_player_to_dict(p) for p in state.players],
            "independent_railroads": {
                name: {"name": railroad.name, "routes": list(railroad.routes)}
                for name, railroad in state.independent_railroads.items()
            },
            "byod_game_started": state.byod_game_started,
        },
        "ctx": {
            "phase": ctx.phase.value,
            "current_player": ctx.current_player,
            "num_players": ctx.num_players,
            "play_order": list(ctx.play_order),
            "play_order_pos": ctx.play_order_pos,
            "turn": ctx.turn,
        },
    }


def is_valid_serialized_state(data: Any) -> bool:
    """Check that data has the shape produced by serialize_state."""
    if not isinstance(data, dict):
        return False

    state = data.get("state")
    if not isinstance(state, dict):
        return False
    if not isinstance(state.get("contracts"), list):
        return False
    if not isinstance(state.get("players"), list):
        return False
    if not isinstance(state.get("independent_railroads"), dict):
        return False

    ctx = data.get("ctx")
    if not isinstance(ctx, dict):
        return False
    if not isinstance(ctx.get("phase"), str):
        return False
    if not isinstance(ctx.get("current_player"), str):
        return False
    if not isinstance(ctx.get("num_players"), int):
        return False
    if not isinstance(ctx.get("play_order"), list):
        return False
    if not isinstance(ctx.get("play_order_pos"), int):
        return False
    if not isinstance(ctx.get("turn"), int):
        return False

    return True


def deserialize_state(data: Any) -> tuple[GameState, GameContext]:
    """Rebuild state and context from a serialized dictionary.

    Args:
        data: Dictionary produced by serialize_state.

    Returns:
        Tuple of (state, context).

    Raises:
        ValueError: If data is malformed.
    """
    if not is_valid_serialized_state(data):
        raise ValueError("deserialize_state: data is not a serialized game state")

    raw_state, raw_ctx = data["state"], data["ctx"]
    try:
        contracts = [
            Contract(
                id=c["id"],
                destination_key=c["destination_key"],
                commodity=c["commodity"],
                type=ContractType(c["type"]),
                fulfilled=bool(c.get("fulfilled", False)),
                player_id=c.get("player_id"),
                creation_time=c.get("creation_time", 0),
            )
            for c in raw_state["contracts"]
        ]
        players = [
            Player(
                id=p["id"],
                name=p.get("name", f"Player {p['id']}"),
                active_cities=list(p.get("active_cities", [])),
                hub_city=p.get("hub_city"),
                regional_office=p.get("regional_office"),
            )
            for p in raw_state["players"]
        ]
        railroads = {
            name: IndependentRailroad(name=name, routes=list(r.get("routes", [])))
            for name, r in raw_state["independent_railroads"].items()
        }
        phase = GamePhase(raw_ctx["phase"])
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"deserialize_state: {e}") from e

    state = GameState(
        contracts=contracts,
        players=players,
        independent_railroads=railroads,
        byod_game_started=bool(raw_state.get("byod_game_started", False)),
    )
    ctx = GameContext(
        phase=phase,
        current_player=raw_ctx["current_player"],
        num_players=raw_ctx["num_players"],
        play_order=list(raw_ctx["play_order"]),
        play_order_pos=raw_ctx["play_order_pos"],
        turn=raw_ctx["turn"],
    )
    return state, ctx


def serialize_state_to_json(state: GameState, ctx: GameContext) -> str:
    """serialize_state followed by json.dumps."""
    return json.dumps(serialize_state(state, ctx))


def deserialize_state_from_json(json_string: str) -> tuple[GameState, GameContext]:
    """json.loads followed by deserialize_state.

    Raises:
        ValueError: If the string isn't valid JSON or a serialized state.
    """
    if not isinstance(json_string, str):
        raise ValueError("deserialize_state_from_json: expected a string")
    try:
        parsed = json.loads(json_string)
    except json.JSONDecodeError as e:
        raise ValueError(f"deserialize_state_from_json: invalid JSON - {e}") from e
    return deserialize_state(parsed)
