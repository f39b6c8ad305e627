"""Tests for the phase machine, move validation and turn order."""

from woodsteel.engine.contracts import new_contract
from woodsteel.engine.randomness import GameRandom
from woodsteel.models.contract import ContractType
from woodsteel.models.game_state import (
    GameContext,
    GameMode,
    GamePhase,
    create_initial_state,
)
from woodsteel.turn_manager import MOVES_BY_PHASE, MoveValidator, TurnManager
from woodsteel.turn_manager import phase_config


def give_starting_contract(state, player_id: str) -> None:
    contract = new_contract(
        "Boston", "tourists", type=ContractType.PRIVATE, player_id=player_id
    )
    state.add_contract(contract)


# MoveValidator


def test_validator_phase_gating():
    ctx = GameContext(phase=GamePhase.SETUP)
    validator = MoveValidator(ctx)

    valid, error = validator.validate_move("generate_starting_contract")
    assert valid and error == ""

    valid, error = validator.validate_move("generate_private_contract")
    assert not valid
    assert "is not allowed in phase" in error

    ctx.phase = GamePhase.PLAY
    assert validator.validate_move("generate_private_contract")[0]
    assert not validator.validate_move("generate_starting_contract")[0]


def test_validator_rejects_wrong_player():
    ctx = GameContext(phase=GamePhase.PLAY, current_player="1")
    validator = MoveValidator(ctx)

    valid, error = validator.validate_move("end_turn", player_id="0")
    print(f"Rejection: {error}")
    assert not valid
    assert "current player" in error

    assert validator.validate_move("end_turn", player_id="1")[0]


def test_validator_unknown_move():
    validator = MoveValidator(GameContext(phase=GamePhase.PLAY))
    assert not validator.validate_move("fly_to_the_moon")[0]
    assert not validator.validate_move("")[0]


def test_scoring_allows_no_moves():
    validator = MoveValidator(GameContext(phase=GamePhase.SCORING))
    assert validator.get_allowed_moves() == []
    for moves in MOVES_BY_PHASE.values():
        for move in moves:
            assert not validator.validate_move(move)[0]


# TurnManager


def test_end_turn_advances_seat():
    state, ctx = create_initial_state(3)
    manager = TurnManager(state, ctx)

    assert manager.get_current_player_id() == "0"
    assert manager.end_turn() == "1"
    assert ctx.play_order_pos == 1
    assert ctx.turn == 0
    assert manager.is_player_turn("1")


def test_end_turn_wraps_and_counts_rounds():
    state, ctx = create_initial_state(3)
    manager = TurnManager(state, ctx)

    for _ in range(3):
        manager.end_turn()
    assert ctx.current_player == "0"
    assert ctx.play_order_pos == 0
    assert ctx.turn == 1


def test_end_turn_with_empty_play_order():
    state, ctx = create_initial_state(2)
    ctx.play_order = []
    manager = TurnManager(state, ctx)
    assert manager.get_current_player_id() is None
    assert manager.end_turn() is None


def test_setup_ends_when_every_player_has_a_contract():
    state, ctx = create_initial_state(2)
    manager = TurnManager(state, ctx)

    assert not manager.check_phase_transition()
    give_starting_contract(state, "0")
    assert not manager.check_phase_transition()
    assert ctx.phase == GamePhase.SETUP

    give_starting_contract(state, "1")
    assert manager.check_phase_transition()
    assert ctx.phase == GamePhase.PLAY


def test_waiting_for_players_ends_when_started():
    state, ctx = create_initial_state(2, GameMode.BYOD)
    manager = TurnManager(state, ctx)
    assert ctx.phase == GamePhase.WAITING_FOR_PLAYERS

    assert not manager.check_phase_transition()
    state.byod_game_started = True
    assert manager.check_phase_transition()
    assert ctx.phase == GamePhase.SETUP


def test_play_and_scoring_do_not_end():
    state, ctx = create_initial_state(2)
    manager = TurnManager(state, ctx)

    ctx.phase = GamePhase.PLAY
    assert not manager.check_phase_transition()
    ctx.phase = GamePhase.SCORING
    assert not manager.check_phase_transition()
    assert ctx.phase == GamePhase.SCORING


def test_growth_runs_after_last_seat_only(monkeypatch):
    calls = []

    def record_growth(state, rng=None):
        calls.append(state)
        return {"Chicago-Detroit"}

    monkeypatch.setattr(phase_config, "grow_independent_railroads", record_growth)

    state, ctx = create_initial_state(3)
    ctx.phase = GamePhase.PLAY
    manager = TurnManager(state, ctx, GameRandom(1))

    manager.end_turn()
    manager.end_turn()
    assert calls == []

    manager.end_turn()
    assert len(calls) == 1
    assert ctx.turn == 1

    for _ in range(3):
        manager.end_turn()
    assert len(calls) == 2


def test_no_growth_during_setup(monkeypatch):
    calls = []
    monkeypatch.setattr(
        phase_config,
        "grow_independent_railroads",
        lambda state, rng=None: calls.append(state),
    )

    state, ctx = create_initial_state(2)
    manager = TurnManager(state, ctx)
    for _ in range(4):
        manager.end_turn()
    assert calls == []


def test_turn_info():
    state, ctx = create_initial_state(2, player_names=["Ada", "Grace"])
    manager = TurnManager(state, ctx)
    manager.end_turn()

    info = manager.get_turn_info()
    assert info["phase"] == "setup"
    assert info["current_player"] == {"id": "1", "name": "Grace"}
    assert info["play_order"] == ["0", "1"]
