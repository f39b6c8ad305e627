"""Immutable reference data for Wood & Steel.

The city, route and commodity tables are built once at import time from
map_data and never mutated afterwards.
"""

import logging
from dataclasses import dataclass

from woodsteel.models.city import REGION_CODES, City, Commodity, Route, route_key

from .map_data import CITY_TABLE, LIKELY_STARTING_CITIES, ROUTE_TABLE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReferenceData:
    """Lookup tables for the static map.

    Attributes:
        cities: City key to City, in table order.
        routes: Route key to Route, in table order.
        commodities: Commodity key to Commodity, sorted by name.
    """

    cities: dict[str, City]
    routes: dict[str, Route]
    commodities: dict[str, Commodity]


def build_reference_data(
    city_table: list[tuple] = CITY_TABLE,
    route_table: list[tuple] = ROUTE_TABLE,
) -> ReferenceData:
    """Build city, route and commodity lookups from raw tables.

    Args:
        city_table: Rows of (key, state, lat, long, region, commodities, flags).
        route_table: Rows of (city, city, mountainous).

    Returns:
        ReferenceData with adjacency filled in on every city.
    """
    routes: dict[str, Route] = {}
    routes_by_city: dict[str, list[str]] = {row[0]: [] for row in city_table}

    for first, second, mountainous in route_table:
        if first not in routes_by_city or second not in routes_by_city:
            raise ValueError(f"Route {first}-{second} references an unknown city")
        key = route_key(first, second)
        if key in routes:
            raise ValueError(f"Duplicate route: {key}")
        routes[key] = Route(key=key, cities=(first, second), mountainous=mountainous)
        routes_by_city[first].append(key)
        routes_by_city[second].append(key)

    cities: dict[str, City] = {}
    suppliers: dict[str, set[str]] = {}
    for index, (key, state, lat, long, region, goods, flags) in enumerate(city_table):
        if region not in REGION_CODES:
            raise ValueError(f"City {key} has unknown region {region}")
        cities[key] = City(
            key=key,
            id=index,
            state=state,
            latitude=lat,
            longitude=long,
            region=region,
            commodities=tuple(goods),
            routes=tuple(routes_by_city[key]),
            large="large" in flags,
            west_coast="west_coast" in flags,
            near_east_coast="near_east_coast" in flags,
            near_west_coast="near_west_coast" in flags,
        )
        for commodity in goods:
            suppliers.setdefault(commodity, set()).add(key)

    commodities: dict[str, Commodity] = {}
    for commodity in sorted(suppliers):
        supplying = suppliers[commodity]
        regions = [r for r in REGION_CODES if any(cities[c].region == r for c in supplying)]
        commodities[commodity] = Commodity(
            key=commodity,
            cities=frozenset(supplying),
            regions=tuple(regions),
        )

    logger.debug(
        f"Built reference data: {len(cities)} cities, {len(routes)} routes, "
        f"{len(commodities)} commodities"
    )
    return ReferenceData(cities=cities, routes=routes, commodities=commodities)


REFERENCE_DATA = build_reference_data()

__all__ = [
    "ReferenceData",
    "REFERENCE_DATA",
    "LIKELY_STARTING_CITIES",
    "build_reference_data",
]
