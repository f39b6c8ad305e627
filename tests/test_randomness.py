"""Tests for the seeded random helpers."""

from collections import Counter

from woodsteel.engine.randomness import GameRandom


def test_weighted_random_empty():
    rng = GameRandom(1)
    assert rng.weighted_random({}) is None
    assert rng.weighted_random(None) is None


def test_weighted_random_single_key():
    rng = GameRandom(1)
    for _ in range(20):
        assert rng.weighted_random({"only": 5}) == "only"


def test_weighted_random_zero_weight_never_chosen():
    rng = GameRandom(2)
    picks = {rng.weighted_random({"never": 0, "always": 3}) for _ in range(200)}
    assert picks == {"always"}


def test_weighted_random_follows_weights():
    rng = GameRandom(3)
    counts = Counter(rng.weighted_random({"a": 1, "b": 3}) for _ in range(4000))
    share = counts["b"] / 4000
    print(f"Share of b: {share:.3f}")
    assert 0.7 < share < 0.8


def test_seed_reproduces_draws():
    first = GameRandom(42)
    second = GameRandom(42)
    weights = {"north": 3, "south": 3, "east": 7, "west": 7}
    assert [first.weighted_random(weights) for _ in range(50)] == [
        second.weighted_random(weights) for _ in range(50)
    ]


def test_random_array_item():
    rng = GameRandom(4)
    assert rng.random_array_item([]) is None
    items = ["x", "y", "z"]
    assert {rng.random_array_item(items) for _ in range(100)} == set(items)


def test_random_set_item():
    rng = GameRandom(5)
    assert rng.random_set_item(set()) is None
    assert rng.random_set_item({"solo"}) == "solo"


def test_shuffle_array_is_a_permutation_of_a_copy():
    rng = GameRandom(6)
    items = list(range(20))
    shuffled = rng.shuffle_array(items)
    assert items == list(range(20))
    assert sorted(shuffled) == items
    assert shuffled != items


def test_gaussian_random_in_unit_interval():
    rng = GameRandom(7)
    for _ in range(1000):
        value = rng.gaussian_random()
        assert 0.0 <= value <= 1.0


def test_coin_flip_is_fair_enough():
    rng = GameRandom(8)
    heads = sum(rng.coin_flip() for _ in range(2000))
    assert 900 < heads < 1100
