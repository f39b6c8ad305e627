"""Seeding and round growth of independent railroad companies."""

import logging
import math

from woodsteel.data import LIKELY_STARTING_CITIES, REFERENCE_DATA, ReferenceData
from woodsteel.models.game_state import GameState
from woodsteel.models.railroad import IndependentRailroad

from .graph import (
    ConnectionOptions,
    cities_connected_to,
    cities_on_routes,
    routes_touching,
    routes_without_these_cities,
)
from .railroad_names import generate_railroad_name
from .randomness import GameRandom, default_rng

logger = logging.getLogger(__name__)

# Share of eligible routes handed to independent railroads at setup
INITIAL_OCCUPANCY = 0.1

# Distance from the likely starting cities kept free of independents at setup
STARTING_CITY_BUFFER = 2

MAX_GROWTH_ATTEMPTS = 100
MAX_NAME_ATTEMPTS = 100

# Occupancy bucket (percent of available routes held, nearest 5) ->
# growth in percentage points -> relative weight.
#
# E.g. at 25% occupancy there's a 10% chance of no growth, a 70% chance of
# growing to 27% and a 20% chance of growing to 29%.
GROWTH_PROBABILITIES: dict[int, dict[int, int]] = {
    5: {2: 10, 4: 20, 6: 30, 8: 40},
    10: {0: 5, 2: 45, 4: 35, 6: 10, 8: 5},
    15: {0: 5, 2: 55, 4: 30, 6: 10},
    20: {0: 10, 2: 60, 4: 25, 6: 5},
    25: {0: 10, 2: 70, 4: 20},
    30: {0: 35, 2: 50, 4: 15},
    35: {0: 50, 2: 40, 4: 10},
    40: {0: 70, 2: 30},
    45: {0: 95, 2: 5},
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return math.floor(value + 0.5)


def route_ownership(
    railroads: dict[str, IndependentRailroad],
) -> dict[str, str]:
    """Map each owned route key to the name of the railroad owning it."""
    owners: dict[str, str] = {}
    for name, railroad in railroads.items():
        for route_key in railroad.routes:
            owners.setdefault(route_key, name)
    return owners


def city_ownership(
    railroads: dict[str, IndependentRailroad],
    data: ReferenceData = REFERENCE_DATA,
) -> dict[str, set[str]]:
    """Map each city touched by an independent railroad to its owners' names."""
    owners: dict[str, set[str]] = {}
    for name, railroad in railroads.items():
        for city_key in cities_on_routes(railroad.routes, data):
            owners.setdefault(city_key, set()).add(name)
    return owners


def available_routes(
    state: GameState, data: ReferenceData = REFERENCE_DATA
) -> set[str]:
    """Routes independent railroads may grow into.

    Player route ownership isn't tracked, so everything within 1 route of a
    player's active cities is treated as player territory.
    """
    near_players = cities_connected_to(
        state.all_active_cities(),
        ConnectionOptions(distance=1, include_from_cities=True),
        data,
    )
    return routes_without_these_cities(near_players, data)


def _unique_name(
    railroads: dict[str, IndependentRailroad],
    rng: GameRandom,
    state_code: str | None,
) -> str:
    name = generate_railroad_name(rng, state_code)
    attempts = 1
    while name in railroads and attempts < MAX_NAME_ATTEMPTS:
        name = generate_railroad_name(rng, state_code)
        attempts += 1

    # Fall back to numbering if the name space is exhausted
    base, number = name, 2
    while name in railroads:
        name = f"{base} No. {number}"
        number += 1
    return name


def initialize_independent_railroads(
    rng: GameRandom | None = None,
    data: ReferenceData = REFERENCE_DATA,
    starting_cities: list[str] = LIKELY_STARTING_CITIES,
) -> dict[str, IndependentRailroad]:
    """Place single-route independent railroads on ~10% of eligible routes.

    Eligible routes have neither endpoint within 2 routes of a likely
    starting city. Routes are taken from a shuffled queue and skipped if
    either endpoint already belongs to another company, so no city is
    shared between companies.

    Args:
        rng: Random source.
        data: Reference data.
        starting_cities: Cities players are likely to start from.

    Returns:
        Railroad name to IndependentRailroad, in creation order.
    """
    rng = rng or default_rng()
    near_start = cities_connected_to(
        starting_cities,
        ConnectionOptions(distance=STARTING_CITY_BUFFER, include_from_cities=True),
        data,
    )
    eligible = sorted(routes_without_these_cities(near_start, data))
    target = math.ceil(len(eligible) * INITIAL_OCCUPANCY)

    queue = rng.shuffle_array(eligible)
    railroads: dict[str, IndependentRailroad] = {}
    owned_routes: dict[str, str] = {}
    owned_cities: dict[str, str] = {}

    while len(railroads) < target and queue:
        route_key = queue.pop()
        route = data.routes.get(route_key)
        if route is None:
            continue

        name = _unique_name(railroads, rng, data.cities[route.cities[0]].state)

        if route_key in owned_routes:
            continue
        if any(
            owned_cities.get(city_key, name) != name for city_key in route.cities
        ):
            logger.debug(f"Skipping {route_key}: endpoint owned by another railroad")
            continue

        railroads[name] = IndependentRailroad(name=name, routes=[route_key])
        owned_routes[route_key] = name
        for city_key in route.cities:
            owned_cities.setdefault(city_key, name)

    logger.info(
        f"Seeded {len(railroads)} independent railroads on {len(eligible)} eligible routes"
    )
    return railroads


def grow_independent_railroads(
    state: GameState,
    rng: GameRandom | None = None,
    data: ReferenceData = REFERENCE_DATA,
) -> set[str] | None:
    """Grow the independent railroads at the end of a round.

    Occupancy is the percentage of available routes already held by
    independent railroads. A growth amount in percentage points is drawn
    from GROWTH_PROBABILITIES for the current occupancy and converted back
    into a number of routes. Each added route extends an existing company
    and never touches a city within 1 route of another company.

    Args:
        state: Game state; its railroads are extended in place.
        rng: Random source.
        data: Reference data.

    Returns:
        Keys of added routes (possibly fewer than drawn), or None when no
        growth was attempted.
    """
    rng = rng or default_rng()
    railroads = state.independent_railroads
    if not railroads:
        return None

    available = available_routes(state, data)
    if not available:
        logger.debug("No routes available for independent railroad growth")
        return None

    starting_count = sum(len(r.routes) for r in railroads.values())
    occupancy = round_half_up(100 * starting_count / len(available))

    smallest, largest = min(GROWTH_PROBABILITIES), max(GROWTH_PROBABILITIES)
    bucket = min(max(round_half_up(occupancy / 5) * 5, smallest), largest)
    growth = rng.weighted_random(GROWTH_PROBABILITIES[bucket])
    if not growth:
        logger.debug(f"No independent railroad growth at {occupancy}% occupancy")
        return None

    target_count = round_half_up((occupancy + growth) * len(available) / 100)

    # A nonzero draw can still round to no new routes
    if target_count <= starting_count:
        if rng.coin_flip():
            target_count = starting_count + 1
        else:
            return None

    to_add = target_count - starting_count
    added: set[str] = set()
    owners = route_ownership(railroads)
    names = list(railroads)

    attempts = 0
    while len(added) < to_add and attempts < MAX_GROWTH_ATTEMPTS:
        attempts += 1
        name = rng.random_array_item(names)
        railroad = railroads[name]

        own_cities = cities_on_routes(railroad.routes, data)
        other_cities: set[str] = set()
        for other_name, other in railroads.items():
            if other_name != name:
                other_cities.update(cities_on_routes(other.routes, data))
        near_others = cities_connected_to(
            other_cities, ConnectionOptions(include_from_cities=True), data
        )

        candidates = []
        for route_key in sorted(routes_touching(own_cities, data)):
            if route_key in owners or route_key not in available:
                continue
            if any(c in near_others for c in data.routes[route_key].cities):
                continue
            candidates.append(route_key)

        route_key = rng.random_array_item(candidates)
        if route_key is None:
            continue
        railroad.add_route(route_key)
        owners[route_key] = name
        added.add(route_key)

    logger.info(
        f"Independent railroads grew by {len(added)} of {to_add} routes "
        f"({occupancy}% -> {occupancy + growth}% target occupancy)"
    )
    return added
