"""Contract generation and valuation for Wood & Steel."""

import logging
import uuid
from collections.abc import Iterable

from woodsteel.data import REFERENCE_DATA, ReferenceData
from woodsteel.models.city import REGION_CODES
from woodsteel.models.contract import Contract, ContractType, PrivateContractSpec
from woodsteel.models.game_state import GameContext, GameState

from .geo import DIRECTIONS, cardinal_direction
from .graph import (
    ConnectionOptions,
    cities_connected_to,
    distance_to_supplier,
    not_mountainous,
)
from .randomness import GameRandom, default_rng

logger = logging.getLogger(__name__)

# Dollars earned per route between the destination and the nearest supplier
DOLLARS_PER_SEGMENT = 3000

# Market contracts must be at least this many routes from a supplier
MIN_MARKET_DISTANCE = 2

# Attempts allowed when searching for a contract that isn't already live
MAX_CONTRACT_ATTEMPTS = 50

# Attempts allowed when searching for a fresh private contract spec
MAX_SPEC_ATTEMPTS = 50

# Base number of private contract offers shown to a player
BASE_OFFER_COUNT = 2

# Railroad tie values: rows are destination regions, columns are commodity
# regions, both in REGION_CODES order
RAILROAD_TIE_VALUES = {
    "NW": [1, 2, 3, 2, 3, 4],
    "NC": [2, 1, 2, 3, 2, 3],
    "NE": [3, 2, 1, 4, 3, 2],
    "SW": [2, 3, 4, 1, 2, 3],
    "SC": [3, 2, 3, 2, 1, 2],
    "SE": [4, 3, 2, 3, 2, 1],
}


def new_contract(
    destination_key: str,
    commodity: str,
    type: ContractType | str = ContractType.MARKET,
    player_id: str | None = None,
    fulfilled: bool = False,
    data: ReferenceData = REFERENCE_DATA,
) -> Contract | None:
    """Validate parameters and build a contract.

    Args:
        destination_key: Key of the destination city.
        commodity: Commodity to deliver.
        type: 'market' or 'private'.
        player_id: Holding player, if any.
        fulfilled: Initial fulfilled flag.
        data: Reference data to validate against.

    Returns:
        The new contract, or None if the city or commodity is unknown, the
        type is invalid, or the destination already supplies the commodity.
    """
    city = data.cities.get(destination_key) if isinstance(destination_key, str) else None
    if city is None:
        logger.error(f'new_contract: "{destination_key}" is not a city')
        return None
    if not isinstance(commodity, str) or commodity not in data.commodities:
        logger.error(f'new_contract: "{commodity}" is not a commodity')
        return None
    try:
        contract_type = ContractType(type)
    except ValueError:
        logger.error(f'new_contract: "{type}" is not a valid type')
        return None
    if city.supplies(commodity):
        logger.error(f"new_contract: {destination_key} already supplies {commodity}")
        return None

    return Contract(
        id=f"{commodity[:3]}-{city.id}-{uuid.uuid4().hex[:12]}",
        destination_key=destination_key,
        commodity=commodity,
        type=contract_type,
        fulfilled=fulfilled,
        player_id=player_id,
    )


def money_value(
    contract: Contract | PrivateContractSpec, data: ReferenceData = REFERENCE_DATA
) -> int:
    """Dollar value of a contract if fulfilled.

    $3,000 per route between the destination and the closest city that
    supplies the commodity.
    """
    distance = distance_to_supplier(contract.destination_key, contract.commodity, data)
    return (distance or 0) * DOLLARS_PER_SEGMENT


def railroad_tie_value(
    contract: Contract | PrivateContractSpec, data: ReferenceData = REFERENCE_DATA
) -> int:
    """Railroad tie reward (1-4) based on destination and commodity regions."""
    city = data.cities.get(contract.destination_key)
    commodity = data.commodities.get(contract.commodity)
    if city is None or commodity is None or not commodity.regions:
        return 0

    row = RAILROAD_TIE_VALUES[city.region]
    return min(row[REGION_CODES.index(region)] for region in commodity.regions)


def value_of_city(
    state: GameState,
    city_key: str,
    is_hub_city: bool = False,
    data: ReferenceData = REFERENCE_DATA,
) -> int | None:
    """Weight of a city when picking contract destinations.

    Args:
        state: Game state (fulfilled contracts raise a city's value).
        city_key: Key of the city.
        is_hub_city: Include the value of each neighbouring city.
        data: Reference data.

    Returns:
        Integer weight, or None if the city is unknown.
    """
    city = data.cities.get(city_key)
    if city is None:
        logger.error(f'value_of_city("{city_key}"): could not find city_key')
        return None

    fulfilled_here = 0
    using_commodities_from_here = 0
    for contract in state.contracts:
        if contract.fulfilled:
            fulfilled_here += 1 if contract.destination_key == city_key else 0
            using_commodities_from_here += 1 if city.supplies(contract.commodity) else 0

    value = (
        2
        * (
            1
            + (1 if city.commodities else 0)
            + (1 if city.large else 0)
            + 3 * (1 if city.west_coast else 0)
        )
        + 2 * fulfilled_here
        + using_commodities_from_here
    )

    if is_hub_city:
        for neighbor in sorted(cities_connected_to([city_key], data=data)):
            value += value_of_city(state, neighbor, data=data) or 0

    return value


def weighted_random_city(
    state: GameState,
    city_keys: Iterable[str],
    rng: GameRandom,
    data: ReferenceData = REFERENCE_DATA,
) -> str | None:
    """Pick a city key weighted by value_of_city, or None if there are none."""
    weights: dict[str, int] = {}
    for key in sorted(set(city_keys)):
        value = value_of_city(state, key, data=data)
        if value is not None:
            weights[key] = value
    return rng.weighted_random(weights)


def cities_by_direction(
    from_cities: Iterable[str],
    candidates: Iterable[str],
    data: ReferenceData = REFERENCE_DATA,
) -> dict[str, set[str]]:
    """Bucket candidate cities by compass direction from the origin cities.

    A candidate can land in several buckets when there is more than one
    origin. An empty bucket borrows the opposite direction's candidates.
    """
    origins = list(from_cities)
    buckets: dict[str, set[str]] = {d: set() for d in DIRECTIONS}
    for candidate in candidates:
        for origin in origins:
            if candidate == origin:
                continue
            direction = cardinal_direction(origin, candidate, data)
            if direction:
                buckets[direction].add(candidate)

    if not buckets["north"]:
        buckets["north"] = buckets["south"]
    elif not buckets["south"]:
        buckets["south"] = buckets["north"]
    if not buckets["east"]:
        buckets["east"] = buckets["west"]
    elif not buckets["west"]:
        buckets["west"] = buckets["east"]

    return buckets


def generate_starting_contract(
    state: GameState,
    active_cities: list[str],
    player_id: str,
    rng: GameRandom | None = None,
    data: ReferenceData = REFERENCE_DATA,
) -> Contract | None:
    """Create a starting private contract for a pair of starting cities.

    Args:
        state: Game state.
        active_cities: Keys of exactly two starting cities.
        player_id: Player who will hold the contract.
        rng: Random source.
        data: Reference data.

    Returns:
        A private contract whose commodity and destination are not already
        live, or None if generation fails.
    """
    rng = rng or default_rng()
    if not isinstance(active_cities, (list, tuple)) or len(active_cities) != 2:
        logger.error(f"generate_starting_contract({active_cities}): not a pair of cities")
        return None

    # Destinations are within 2 routes of the starting cities, avoiding mountains
    candidates = cities_connected_to(
        active_cities,
        ConnectionOptions(distance=2, route_filter=not_mountainous),
        data,
    )
    by_direction = cities_by_direction(active_cities, candidates, data)

    live = state.live_contract_keys()
    for _ in range(MAX_SPEC_ATTEMPTS):
        spec = _draw_starting_contract_spec(state, active_cities, by_direction, rng, data)
        if spec is None:
            continue
        if spec.key not in live:
            return new_contract(
                spec.destination_key,
                spec.commodity,
                type=ContractType.PRIVATE,
                player_id=player_id,
                data=data,
            )
        logger.debug(f"Starting contract {spec.key} already live, redrawing")

    logger.error(
        f"generate_starting_contract: no fresh contract for player {player_id} "
        f"after {MAX_SPEC_ATTEMPTS} attempts"
    )
    return None


def _draw_starting_contract_spec(
    state: GameState,
    active_cities: list[str],
    by_direction: dict[str, set[str]],
    rng: GameRandom,
    data: ReferenceData,
) -> PrivateContractSpec | None:
    """Single randomized attempt at a starting contract spec."""
    # N 15%, S 15%, E 35%, W 35%, or 50/50 when only one axis has cities
    if not by_direction["north"]:
        direction_weights = {"east": 1, "west": 1}
    elif not by_direction["east"]:
        direction_weights = {"north": 1, "south": 1}
    else:
        direction_weights = {"north": 3, "south": 3, "east": 7, "west": 7}

    direction = rng.weighted_random(direction_weights)
    in_direction = sorted(by_direction.get(direction, set()))
    if not in_direction:
        return None

    # Commodities offered by every candidate can't be delivered to any of them
    counts: dict[str, int] = {}
    for candidate in in_direction:
        for commodity in data.cities[candidate].commodities:
            counts[commodity] = counts.get(commodity, 0) + 1
    everywhere = {c for c, n in counts.items() if n == len(in_direction)}

    starting_commodities: set[str] = set()
    for key in active_cities:
        city = data.cities.get(key)
        if city is not None:
            starting_commodities.update(city.commodities)

    commodity = rng.random_set_item(sorted(starting_commodities - everywhere))
    if commodity is None:
        return None

    destination = weighted_random_city(
        state,
        [c for c in in_direction if not data.cities[c].supplies(commodity)],
        rng,
        data,
    )
    if destination is None:
        return None
    return PrivateContractSpec(commodity=commodity, destination_key=destination)


def _draw_private_contract_spec(
    state: GameState,
    active_cities: list[str],
    rng: GameRandom,
    commodity_region: str | None,
    data: ReferenceData,
) -> PrivateContractSpec | None:
    """Single randomized attempt at a private contract spec."""
    current_city = data.cities.get(active_cities[-1])
    if current_city is None:
        return None

    # Bias away from creating coastal connections
    direction_weights = {"north": 3, "south": 3}
    if current_city.near_east_coast:
        direction_weights.update(east=3, west=11)
    elif current_city.near_west_coast:
        direction_weights.update(east=11, west=3)
    else:
        direction_weights.update(east=7, west=7)

    by_direction = cities_by_direction(
        [current_city.key],
        cities_connected_to(active_cities, ConnectionOptions(distance=2), data),
        data,
    )
    direction = rng.weighted_random(direction_weights)
    in_direction = by_direction.get(direction, set())
    if not in_direction:
        logger.debug(f"No private contract candidates to the {direction}")
        return None

    destination = weighted_random_city(state, in_direction, rng, data)
    if destination is None:
        return None

    available: set[str] = set()
    if commodity_region is None:
        for key in cities_connected_to(active_cities, ConnectionOptions(distance=1), data):
            available.update(data.cities[key].commodities)
    else:
        for commodity in data.commodities.values():
            if commodity_region in commodity.regions:
                available.add(commodity.key)
    available.difference_update(data.cities[destination].commodities)

    commodity = rng.random_set_item(sorted(available))
    if commodity is None:
        return None
    return PrivateContractSpec(commodity=commodity, destination_key=destination)


def generate_private_contract_spec(
    state: GameState,
    ctx: GameContext,
    rng: GameRandom | None = None,
    commodity_region: str | None = None,
    data: ReferenceData = REFERENCE_DATA,
) -> PrivateContractSpec | None:
    """Generate a commodity/destination pair for the current player.

    The destination lies within 2 routes of the player's active cities and
    the commodity is supplied within 1 route of them (or anywhere in
    commodity_region when given), but never by the destination itself.
    Pairs matching an unfulfilled contract are redrawn.

    Args:
        state: Game state.
        ctx: Game context (identifies the current player).
        rng: Random source.
        commodity_region: Optional region code to draw commodities from.
        data: Reference data.

    Returns:
        A spec, or None if the player is unknown, has no active cities, or
        no fresh pair was found within MAX_SPEC_ATTEMPTS.
    """
    rng = rng or default_rng()
    player = state.get_player(ctx.current_player)
    if player is None:
        logger.error(f"generate_private_contract_spec: player {ctx.current_player} not found")
        return None
    if not player.active_cities:
        return None

    live = state.live_contract_keys()
    for _ in range(MAX_SPEC_ATTEMPTS):
        spec = _draw_private_contract_spec(
            state, list(player.active_cities), rng, commodity_region, data
        )
        if spec is not None and spec.key not in live:
            return spec

    logger.error(
        f"generate_private_contract_spec: no fresh spec for player {player.id} "
        f"after {MAX_SPEC_ATTEMPTS} attempts"
    )
    return None


def generate_private_contract_offers(
    state: GameState,
    ctx: GameContext,
    rng: GameRandom | None = None,
    count: int | None = None,
    data: ReferenceData = REFERENCE_DATA,
) -> list[PrivateContractSpec]:
    """Unique private contract specs for the current player to choose from.

    The default count is 2, plus one for a hub city and one for a regional
    office. A regional office's offer is drawn first, from its region.

    Returns:
        Up to count specs, no two sharing a commodity|destination key.
    """
    rng = rng or default_rng()
    player = state.get_player(ctx.current_player)
    offers: list[PrivateContractSpec] = []
    seen: set[str] = set()

    if count is None:
        count = BASE_OFFER_COUNT
        if player is not None and player.hub_city is not None:
            count += 1
        if player is not None and player.regional_office is not None:
            count += 1

    if player is not None and player.regional_office is not None and count > 0:
        spec = generate_private_contract_spec(
            state, ctx, rng, commodity_region=player.regional_office, data=data
        )
        if spec is not None:
            offers.append(spec)
            seen.add(spec.key)

    attempts = 0
    while attempts < MAX_CONTRACT_ATTEMPTS and len(offers) < count:
        attempts += 1
        spec = generate_private_contract_spec(state, ctx, rng, data=data)
        if spec is None or spec.key in seen:
            continue
        seen.add(spec.key)
        offers.append(spec)

    return offers


def generate_private_contract(
    state: GameState,
    ctx: GameContext,
    rng: GameRandom | None = None,
    data: ReferenceData = REFERENCE_DATA,
) -> Contract | None:
    """Create a private contract for the current player."""
    spec = generate_private_contract_spec(state, ctx, rng, data=data)
    if spec is None:
        return None
    return new_contract(
        spec.destination_key,
        spec.commodity,
        type=ContractType.PRIVATE,
        player_id=ctx.current_player,
        data=data,
    )


def generate_market_contract(
    state: GameState,
    rng: GameRandom | None = None,
    data: ReferenceData = REFERENCE_DATA,
) -> Contract | None:
    """Create a market contract near the players' networks.

    The destination lies within 2 routes of any active city (but is not one)
    and the commodity is supplied in or next to an active city, at least
    MIN_MARKET_DISTANCE routes from the destination.

    Returns:
        A market contract worth at least $6,000, or None.
    """
    rng = rng or default_rng()
    active_cities = state.all_active_cities()

    candidates = cities_connected_to(active_cities, ConnectionOptions(distance=2), data)
    destination = weighted_random_city(state, candidates, rng, data)
    if destination is None:
        return None
    destination_city = data.cities[destination]

    nearby = cities_connected_to(
        active_cities, ConnectionOptions(distance=1, include_from_cities=True), data
    )
    possible: set[str] = set()
    for key in nearby:
        possible.update(
            c for c in data.cities[key].commodities if not destination_city.supplies(c)
        )

    valid = []
    for commodity in sorted(possible):
        distance = distance_to_supplier(destination, commodity, data)
        if distance is not None and distance >= MIN_MARKET_DISTANCE:
            valid.append(commodity)

    if not valid:
        logger.error(
            f"generate_market_contract: no commodities at distance >= {MIN_MARKET_DISTANCE} "
            f"from {destination}"
        )
        return None

    commodity = rng.random_array_item(valid)
    return new_contract(destination, commodity, type=ContractType.MARKET, data=data)


def generate_unique_market_contract(
    state: GameState,
    rng: GameRandom | None = None,
    max_attempts: int = MAX_CONTRACT_ATTEMPTS,
    data: ReferenceData = REFERENCE_DATA,
) -> Contract | None:
    """Generate a market contract that doesn't duplicate a live contract.

    Returns:
        The contract, or None if generation failed or every attempt
        duplicated an unfulfilled contract.
    """
    rng = rng or default_rng()
    live = state.live_contract_keys()

    for _ in range(max_attempts):
        candidate = generate_market_contract(state, rng, data)
        if candidate is None:
            return None
        if candidate.key not in live:
            return candidate

    logger.error(
        f"Failed to generate a market contract that does not duplicate an active "
        f"contract after {max_attempts} attempts"
    )
    return None
