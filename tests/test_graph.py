"""Tests for graph reachability and compass helpers."""

from woodsteel.data import REFERENCE_DATA
from woodsteel.engine.geo import cardinal_direction, heading
from woodsteel.engine.graph import (
    ConnectionOptions,
    cities_connected_to,
    cities_on_routes,
    distance_to_supplier,
    not_mountainous,
    routes_touching,
    routes_without_these_cities,
    shortest_distance,
)


def test_reference_data_is_consistent():
    """Every route endpoint knows about the route, and commodities match suppliers."""
    for key, route in REFERENCE_DATA.routes.items():
        for city_key in route.cities:
            assert key in REFERENCE_DATA.cities[city_key].routes

    for commodity in REFERENCE_DATA.commodities.values():
        assert commodity.cities
        for city_key in commodity.cities:
            assert REFERENCE_DATA.cities[city_key].supplies(commodity.key)


def test_reference_data_exports():
    """Reference tables are reached through REFERENCE_DATA only."""
    import woodsteel.data as data

    assert sorted(data.__all__) == sorted(
        ["ReferenceData", "REFERENCE_DATA", "LIKELY_STARTING_CITIES", "build_reference_data"]
    )
    for name in data.__all__:
        assert hasattr(data, name)
    assert not hasattr(data, "commodities")


def test_empty_seed_set_returns_empty():
    assert cities_connected_to([]) == set()
    assert cities_connected_to([], ConnectionOptions(include_from_cities=True)) == set()


def test_direct_neighbors():
    neighbors = cities_connected_to(["Philadelphia"])
    assert neighbors == {"Washington", "Pittsburgh", "New York"}
    assert "Philadelphia" not in neighbors


def test_include_from_cities():
    neighbors = cities_connected_to(
        ["Philadelphia"], ConnectionOptions(include_from_cities=True)
    )
    assert "Philadelphia" in neighbors


def test_duplicate_seeds_are_idempotent():
    once = cities_connected_to(["Chicago"], ConnectionOptions(distance=2))
    twice = cities_connected_to(["Chicago", "Chicago"], ConnectionOptions(distance=2))
    assert once == twice


def test_distance_two_contains_distance_one():
    one = cities_connected_to(["Chicago"])
    two = cities_connected_to(["Chicago"], ConnectionOptions(distance=2))
    assert one <= two
    assert len(two) > len(one)


def test_route_filter_skips_mountains():
    neighbors = cities_connected_to(
        ["Philadelphia"], ConnectionOptions(route_filter=not_mountainous)
    )
    assert "Pittsburgh" not in neighbors
    assert "New York" in neighbors


def test_unknown_seed_is_ignored():
    assert cities_connected_to(["Atlantis"]) == set()
    assert cities_connected_to(["Atlantis", "Philadelphia"]) == cities_connected_to(
        ["Philadelphia"]
    )


def test_shortest_distance():
    assert shortest_distance("Chicago", lambda key: key == "Chicago") == 0
    assert shortest_distance("Chicago", lambda key: key == "Detroit") == 1
    assert shortest_distance("Atlantis", lambda key: True) is None
    assert shortest_distance("Chicago", lambda key: False) is None


def test_distance_to_supplier():
    # Detroit doesn't supply coal but its neighbour Chicago does
    assert distance_to_supplier("Detroit", "coal") == 1
    assert distance_to_supplier("Chicago", "coal") == 0
    assert distance_to_supplier("Atlantis", "coal") is None
    assert distance_to_supplier("Pittsburgh", "coal") == 0


def test_routes_without_these_cities():
    assert routes_without_these_cities([]) == set(REFERENCE_DATA.routes)

    remaining = routes_without_these_cities(["Chicago"])
    assert "Chicago-Detroit" not in remaining
    for key in remaining:
        assert "Chicago" not in REFERENCE_DATA.routes[key].cities


def test_routes_touching_and_cities_on_routes():
    touching = routes_touching(["Philadelphia"])
    assert "New York-Philadelphia" in touching
    assert cities_on_routes(touching) == {
        "Philadelphia",
        "Washington",
        "Pittsburgh",
        "New York",
    }


def test_cardinal_directions():
    assert cardinal_direction("Chicago", "Detroit") == "east"
    assert cardinal_direction("Detroit", "Chicago") == "west"
    assert cardinal_direction("Norfolk", "Washington") == "north"
    assert cardinal_direction("Savannah", "Jacksonville") == "south"


def test_heading_unknown_city():
    assert heading("Chicago", "Atlantis") is None
    assert cardinal_direction("Atlantis", "Chicago") is None

    bearing = heading("Chicago", "Detroit")
    assert 0 <= bearing < 360
