"""Tests for the game engine moves."""

import pytest

from woodsteel.engine.game_engine import GameEngine
from woodsteel.engine.randomness import GameRandom
from woodsteel.models.contract import ContractType
from woodsteel.models.game_state import GameMode, GamePhase


class RecordingPersistence:
    """Persistence collaborator that remembers every save."""

    def __init__(self, code="BCDFG"):
        self.code = code
        self.saves = []

    def get_current_game_code(self):
        return self.code

    def save_game_state(self, code, state, ctx):
        self.saves.append((code, ctx.phase, ctx.turn))
        return True


class BrokenPersistence:
    """Persistence collaborator whose saves always blow up."""

    def get_current_game_code(self):
        return "BCDFG"

    def save_game_state(self, code, state, ctx):
        raise OSError("disk full")


def started_engine(seed=1, persistence=None) -> GameEngine:
    """Two-player hotseat engine already in the play phase."""
    engine = GameEngine(num_players=2, rng=GameRandom(seed), persistence=persistence)
    assert engine.generate_starting_contract(["New York", "Philadelphia"])["success"]
    assert engine.generate_starting_contract(["Chicago", "Detroit"])["success"]
    assert engine.phase == GamePhase.PLAY
    return engine


# Creation and setup


def test_fresh_engine():
    engine = GameEngine(num_players=3, rng=GameRandom(1))
    assert engine.phase == GamePhase.SETUP
    assert engine.ctx.current_player == "0"
    assert [p.id for p in engine.state.players] == ["0", "1", "2"]
    assert engine.state.contracts == []
    assert engine.state.independent_railroads
    assert engine.get_available_moves() == ["generate_starting_contract"]


def test_invalid_game_mode():
    with pytest.raises(ValueError):
        GameEngine(game_mode="party")


def test_setup_game_is_idempotent():
    engine = GameEngine(rng=GameRandom(2))
    railroads = dict(engine.state.independent_railroads)
    engine.setup_game()
    assert engine.state.independent_railroads == railroads


def test_setup_reaches_play():
    engine = GameEngine(num_players=2, rng=GameRandom(3))

    result = engine.generate_starting_contract(["New York", "Philadelphia"])
    print(result["message"])
    assert result["success"]
    assert result["contract"].player_id == "0"
    assert result["contract"].type == ContractType.PRIVATE
    assert engine.get_player_active_cities("0") == ["New York", "Philadelphia"]
    assert engine.ctx.current_player == "1"
    assert engine.phase == GamePhase.SETUP

    result = engine.generate_starting_contract(["Chicago", "Detroit"])
    assert result["success"]
    assert engine.phase == GamePhase.PLAY
    assert engine.ctx.current_player == "0"
    assert engine.ctx.turn == 1


def test_starting_contract_rejects_bad_cities():
    engine = GameEngine(rng=GameRandom(4))
    assert not engine.generate_starting_contract(["New York"])["success"]
    assert not engine.generate_starting_contract(["New York", "Atlantis"])["success"]
    assert engine.state.contracts == []
    assert engine.ctx.current_player == "0"


def test_starting_contract_rejects_non_string_cities():
    engine = GameEngine(rng=GameRandom(4))
    result = engine.generate_starting_contract([["Chicago"], "Detroit"])
    assert not result["success"]
    assert "strings" in result["error"]
    assert not engine.generate_starting_contract([None, 7])["success"]
    assert engine.state.contracts == []
    assert engine.ctx.current_player == "0"


def test_starting_contract_saves_once():
    persistence = RecordingPersistence()
    engine = GameEngine(num_players=2, rng=GameRandom(5), persistence=persistence)
    saves = len(persistence.saves)

    assert engine.generate_starting_contract(["New York", "Philadelphia"])["success"]
    assert len(persistence.saves) == saves + 1
    assert persistence.saves[-1][:2] == ("BCDFG", GamePhase.SETUP)


def test_starting_contract_wrong_player():
    engine = GameEngine(rng=GameRandom(5))
    result = engine.generate_starting_contract(["New York", "Philadelphia"], "1")
    assert not result["success"]
    assert engine.state.contracts == []


def test_byod_flow():
    engine = GameEngine(num_players=2, game_mode=GameMode.BYOD, rng=GameRandom(6))
    assert engine.phase == GamePhase.WAITING_FOR_PLAYERS
    assert not engine.generate_starting_contract(["New York", "Philadelphia"])[
        "success"
    ]

    assert engine.start_byod_game()["success"]
    assert engine.phase == GamePhase.SETUP
    assert not engine.start_byod_game()["success"]


def test_hotseat_cannot_start_byod():
    engine = GameEngine(rng=GameRandom(7))
    engine.ctx.phase = GamePhase.WAITING_FOR_PLAYERS
    result = engine.start_byod_game()
    assert not result["success"]
    assert not engine.state.byod_game_started


# Play moves


def test_wrong_phase_does_not_mutate_state():
    engine = GameEngine(rng=GameRandom(8))
    result = engine.generate_private_contract()
    assert not result["success"]
    assert "is not allowed in phase" in result["error"]
    assert engine.state.contracts == []


def test_private_contract_goes_to_current_player():
    engine = started_engine(9)
    result = engine.generate_private_contract()
    assert result["success"]
    assert result["contract"].player_id == "0"
    assert result["contract"] in engine.get_player_contracts()


def test_market_contract_fulfill_and_undo():
    engine = started_engine(10)
    result = engine.add_contract("coal", "Boston", type="market")
    assert result["success"]
    contract = result["contract"]
    assert contract in engine.get_market_contracts()

    assert engine.toggle_contract_fulfilled(contract.id)["success"]
    assert contract.fulfilled
    assert contract.player_id == "0"
    assert "Boston" in engine.get_player_active_cities()
    assert contract not in engine.get_market_contracts()

    assert engine.toggle_contract_fulfilled(contract.id)["success"]
    assert not contract.fulfilled
    assert contract.player_id is None
    assert "Boston" not in engine.get_player_active_cities()


def test_other_players_fulfilled_market_contract_is_locked():
    engine = started_engine(11)
    contract = engine.add_contract("coal", "Boston", type="market")["contract"]
    engine.toggle_contract_fulfilled(contract.id)
    engine.end_turn()

    result = engine.toggle_contract_fulfilled(contract.id)
    assert not result["success"]
    assert contract.fulfilled


def test_undo_keeps_city_reached_by_another_contract():
    engine = started_engine(12)
    first = engine.add_contract("coal", "Boston")["contract"]
    second = engine.add_contract("steel", "Boston")["contract"]
    engine.toggle_contract_fulfilled(first.id)
    engine.toggle_contract_fulfilled(second.id)

    engine.toggle_contract_fulfilled(first.id)
    assert "Boston" in engine.get_player_active_cities()


def test_add_contract_rejections():
    engine = started_engine(13)
    count = len(engine.state.contracts)
    assert not engine.add_contract("", "Boston")["success"]
    assert not engine.add_contract("coal", "")["success"]
    assert not engine.add_contract("coal", "Boston", type="auction")["success"]
    assert not engine.add_contract("coal", "Atlantis")["success"]
    assert len(engine.state.contracts) == count


def test_delete_contract():
    engine = started_engine(14)
    contract = engine.add_contract("coal", "Boston")["contract"]
    assert engine.delete_contract(contract.id)["success"]
    assert engine.state.get_contract(contract.id) is None

    contract = engine.add_contract("coal", "Boston")["contract"]
    engine.toggle_contract_fulfilled(contract.id)
    assert not engine.delete_contract(contract.id)["success"]
    assert not engine.delete_contract("missing")["success"]


def test_claim_market_contract():
    engine = started_engine(15)
    contract = engine.add_contract("coal", "Boston", type="market")["contract"]

    result = engine.claim_market_contract(contract.id)
    assert result["success"]
    assert contract.type == ContractType.PRIVATE
    assert contract.player_id == "0"
    if result["replacement"] is not None:
        assert result["replacement"] in engine.get_market_contracts()

    assert not engine.claim_market_contract(contract.id)["success"]


def test_acquire_independent_railroad():
    engine = started_engine(16)
    name, railroad = next(iter(engine.state.independent_railroads.items()))
    route = engine.data.routes[railroad.routes[0]]

    assert engine.acquire_independent_railroad(name)["success"]
    assert name not in engine.state.independent_railroads
    for city_key in route.cities:
        assert city_key in engine.get_player_active_cities()

    assert not engine.acquire_independent_railroad(name)["success"]


def test_add_city_to_player():
    engine = started_engine(17)
    assert engine.add_city_to_player("Boston")["success"]
    assert engine.get_player_active_cities()[-1] == "Boston"
    assert not engine.add_city_to_player("Boston")["success"]
    assert not engine.add_city_to_player("Atlantis")["success"]


def test_play_moves_reject_non_string_arguments():
    engine = started_engine(17)
    cities = list(engine.get_player_active_cities())
    railroads = dict(engine.state.independent_railroads)

    for result in (
        engine.add_city_to_player(["Chicago"]),
        engine.acquire_independent_railroad(["x"]),
        engine.claim_hub_city(["Chicago"]),
        engine.claim_regional_office(["NE"]),
    ):
        assert not result["success"]
        print(result["error"])

    assert engine.get_player_active_cities() == cities
    assert engine.state.independent_railroads == railroads
    assert engine.get_current_player().hub_city is None
    assert engine.get_current_player().regional_office is None


def test_claim_hub_city():
    engine = started_engine(23)
    assert "claim_hub_city" in engine.get_available_moves()

    result = engine.claim_hub_city("New York")
    assert result["success"]
    assert engine.state.get_player("0").hub_city == "New York"

    result = engine.claim_hub_city("Boston")
    assert not result["success"]
    assert "already has a hub" in result["error"]
    assert engine.state.get_player("0").hub_city == "New York"

    assert not engine.claim_hub_city("Atlantis")["success"]


def test_hub_city_belongs_to_one_player():
    engine = started_engine(24)
    assert engine.claim_hub_city("Chicago")["success"]
    engine.end_turn()

    result = engine.claim_hub_city("Chicago")
    assert not result["success"]
    assert "already the hub" in result["error"]
    assert engine.state.get_player("1").hub_city is None

    assert engine.claim_hub_city("Detroit")["success"]
    assert engine.state.get_player("1").hub_city == "Detroit"


def test_claim_regional_office():
    engine = started_engine(25)
    assert "claim_regional_office" in engine.get_available_moves()

    result = engine.claim_regional_office("XX")
    assert not result["success"]
    assert engine.state.get_player("0").regional_office is None

    assert engine.claim_regional_office("NE")["success"]
    assert engine.state.get_player("0").regional_office == "NE"

    result = engine.claim_regional_office("SE")
    assert not result["success"]
    assert "already has a regional office" in result["error"]
    assert engine.state.get_player("0").regional_office == "NE"


def test_regional_office_region_belongs_to_one_player():
    engine = started_engine(26)
    assert engine.claim_regional_office("NE")["success"]
    engine.end_turn()

    result = engine.claim_regional_office("NE")
    assert not result["success"]
    assert engine.state.get_player("1").regional_office is None

    assert engine.claim_regional_office("NC")["success"]
    assert engine.state.get_player("1").regional_office == "NC"


def test_hub_and_office_not_allowed_in_setup():
    engine = GameEngine(rng=GameRandom(27))
    assert not engine.claim_hub_city("New York")["success"]
    assert not engine.claim_regional_office("NE")["success"]
    assert all(p.hub_city is None for p in engine.state.players)
    assert all(p.regional_office is None for p in engine.state.players)


def test_end_turn():
    engine = started_engine(18)
    result = engine.end_turn()
    assert result["success"]
    assert result["current_player"] == "1"

    assert not engine.end_turn("0")["success"]
    result = engine.end_turn("1")
    assert result["current_player"] == "0"
    assert result["turn"] == 2


def test_describe_contract():
    engine = started_engine(19)
    contract = engine.state.contracts[0]
    details = engine.describe_contract(contract)
    assert details["value"] > 0
    assert 1 <= details["railroad_ties"] <= 4
    assert details["type"] == "private"


# Persistence


def test_moves_are_saved():
    persistence = RecordingPersistence()
    engine = started_engine(20, persistence)
    saves = len(persistence.saves)
    assert saves > 0

    engine.generate_private_contract()
    assert len(persistence.saves) > saves
    assert persistence.saves[-1][0] == "BCDFG"


def test_failing_persistence_does_not_break_moves():
    engine = started_engine(21, BrokenPersistence())
    assert engine.generate_private_contract()["success"]
    assert engine.end_turn()["success"]


def test_resume_existing_game():
    engine = started_engine(22)
    resumed = GameEngine(state=engine.state, ctx=engine.ctx, rng=GameRandom(22))
    assert resumed.phase == GamePhase.PLAY
    assert resumed.state.independent_railroads == engine.state.independent_railroads
