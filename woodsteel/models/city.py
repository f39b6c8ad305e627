"""Map models for Wood & Steel: cities, routes and commodities."""

from dataclasses import dataclass, field

# Region codes, in the order used by the railroad tie value matrix
REGION_CODES = ["NW", "NC", "NE", "SW", "SC", "SE"]


@dataclass(frozen=True)
class City:
    """Represents a city on the map.

    Attributes:
        key: Unique city name (e.g., 'Chicago').
        id: Stable numeric identifier.
        state: State or province code (e.g., 'IL').
        latitude: Latitude in degrees.
        longitude: Longitude in degrees.
        region: Region code (one of REGION_CODES).
        commodities: Commodities this city supplies.
        routes: Keys of routes touching this city.
        large: Whether this is a large city.
        west_coast: Whether the city is on the west coast.
        near_east_coast: Whether the city is on or near the east coast.
        near_west_coast: Whether the city is near the west coast.
    """

    key: str
    id: int
    state: str
    latitude: float
    longitude: float
    region: str
    commodities: tuple[str, ...] = ()
    routes: tuple[str, ...] = ()
    large: bool = False
    west_coast: bool = False
    near_east_coast: bool = False
    near_west_coast: bool = False

    def supplies(self, commodity: str) -> bool:
        """Check if this city supplies a commodity."""
        return commodity in self.commodities


@dataclass(frozen=True)
class Route:
    """A track segment between two cities.

    Attributes:
        key: Unique route key.
        cities: The two city keys joined by this route.
        mountainous: Whether the route crosses mountains.
    """

    key: str
    cities: tuple[str, str]
    mountainous: bool = False

    def other_city(self, city_key: str) -> str | None:
        """Get the city on the far side of the route from city_key."""
        first, second = self.cities
        if city_key == first:
            return second
        if city_key == second:
            return first
        return None


@dataclass(frozen=True)
class Commodity:
    """A good supplied by one or more cities.

    Attributes:
        key: Commodity name.
        cities: Keys of supplying cities.
        regions: Region codes where the commodity is supplied.
    """

    key: str
    cities: frozenset[str] = field(default_factory=frozenset)
    regions: tuple[str, ...] = ()


def route_key(first: str, second: str) -> str:
    """Build the canonical key for a route between two cities."""
    return f"{first}-{second}"
