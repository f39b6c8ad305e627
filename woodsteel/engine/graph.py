"""Reachability queries over the static city/route graph."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from woodsteel.data import REFERENCE_DATA, ReferenceData
from woodsteel.models.city import Route

# Maximum search distance for shortest_distance on a disconnected graph
MAX_MAP_DISTANCE = 30


def _any_route(route: Route) -> bool:
    return True


def not_mountainous(route: Route) -> bool:
    """Route filter excluding mountain crossings."""
    return not route.mountainous


@dataclass(frozen=True)
class ConnectionOptions:
    """Options for cities_connected_to.

    Attributes:
        distance: Maximum number of routes to traverse.
        include_from_cities: Whether the seed cities are part of the result.
        route_filter: Predicate deciding which routes may be traversed.
    """

    distance: int = 1
    include_from_cities: bool = False
    route_filter: Callable[[Route], bool] = field(default=_any_route)


def cities_connected_to(
    from_cities: Iterable[str],
    options: ConnectionOptions | None = None,
    data: ReferenceData = REFERENCE_DATA,
) -> set[str]:
    """Breadth-first expansion from a set of seed cities.

    Args:
        from_cities: Keys of cities to start from. Duplicates are ignored.
        options: Distance, seed inclusion and route filter.
        data: Reference data to search.

    Returns:
        Keys of cities reached within options.distance routes.
    """
    options = options or ConnectionOptions()
    seeds = set(from_cities)
    if not seeds:
        return set()

    visited = set(seeds)
    current_level = set(seeds)

    for _ in range(options.distance):
        next_level: set[str] = set()
        for city_key in current_level:
            city = data.cities.get(city_key)
            if city is None:
                continue
            for key in city.routes:
                route = data.routes.get(key)
                if route is None or not options.route_filter(route):
                    continue
                neighbor = route.other_city(city_key)
                if neighbor and neighbor not in visited:
                    visited.add(neighbor)
                    next_level.add(neighbor)
        current_level = next_level
        if not current_level:
            break

    if not options.include_from_cities:
        visited -= seeds
    return visited


def shortest_distance(
    from_key: str,
    city_test: Callable[[str], bool],
    route_filter: Callable[[Route], bool] = _any_route,
    data: ReferenceData = REFERENCE_DATA,
) -> int | None:
    """Number of routes from a city to the closest city passing city_test.

    Args:
        from_key: Key of the starting city.
        city_test: Predicate on city keys identifying a destination.
        route_filter: Predicate deciding which routes may be traversed.
        data: Reference data to search.

    Returns:
        Hop count (0 if the start matches), or None if the start is unknown
        or no match is reachable within MAX_MAP_DISTANCE.
    """
    if from_key not in data.cities:
        return None
    if city_test(from_key):
        return 0

    visited = {from_key}
    current_level = {from_key}
    distance = 0

    while current_level and distance < MAX_MAP_DISTANCE:
        distance += 1
        next_level: set[str] = set()
        for city_key in current_level:
            for key in data.cities[city_key].routes:
                route = data.routes.get(key)
                if route is None or not route_filter(route):
                    continue
                neighbor = route.other_city(city_key)
                if not neighbor or neighbor in visited:
                    continue
                if city_test(neighbor):
                    return distance
                visited.add(neighbor)
                next_level.add(neighbor)
        current_level = next_level

    return None


def distance_to_supplier(
    destination_key: str,
    commodity: str,
    data: ReferenceData = REFERENCE_DATA,
) -> int | None:
    """Hops from a destination to the nearest city supplying a commodity."""
    return shortest_distance(
        destination_key,
        lambda key: data.cities[key].supplies(commodity),
        data=data,
    )


def routes_without_these_cities(
    cities_to_avoid: Iterable[str],
    data: ReferenceData = REFERENCE_DATA,
) -> set[str]:
    """Keys of routes where neither endpoint is in cities_to_avoid."""
    avoid = set(cities_to_avoid)
    return {
        key
        for key, route in data.routes.items()
        if route.cities[0] not in avoid and route.cities[1] not in avoid
    }


def cities_on_routes(
    route_keys: Iterable[str],
    data: ReferenceData = REFERENCE_DATA,
) -> set[str]:
    """Keys of every city at either end of the given routes."""
    found: set[str] = set()
    for key in route_keys:
        route = data.routes.get(key)
        if route is not None:
            found.update(route.cities)
    return found


def routes_touching(
    city_keys: Iterable[str],
    data: ReferenceData = REFERENCE_DATA,
) -> set[str]:
    """Keys of every route incident to any of the given cities."""
    found: set[str] = set()
    for key in city_keys:
        city = data.cities.get(key)
        if city is not None:
            found.update(city.routes)
    return found
