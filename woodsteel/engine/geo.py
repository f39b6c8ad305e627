"""Compass helpers for city pairs."""

import logging
import math

from woodsteel.data import REFERENCE_DATA, ReferenceData

logger = logging.getLogger(__name__)

# Cardinal direction boundaries in degrees
NORTH_EAST_BOUNDARY = 45.0
EAST_SOUTH_BOUNDARY = 135.0
SOUTH_WEST_BOUNDARY = 225.0
WEST_NORTH_BOUNDARY = 315.0

DIRECTIONS = ("north", "east", "south", "west")


def heading(
    from_key: str, to_key: str, data: ReferenceData = REFERENCE_DATA
) -> float | None:
    """Initial compass bearing in degrees from one city to another."""
    from_city = data.cities.get(from_key)
    to_city = data.cities.get(to_key)
    if from_city is None or to_city is None:
        logger.error(f'heading("{from_key}", "{to_key}"): could not find both keys')
        return None

    from_lat = math.radians(from_city.latitude)
    from_long = math.radians(from_city.longitude)
    to_lat = math.radians(to_city.latitude)
    to_long = math.radians(to_city.longitude)

    x = math.cos(to_lat) * math.sin(to_long - from_long)
    y = math.cos(from_lat) * math.sin(to_lat) - math.sin(from_lat) * math.cos(
        to_lat
    ) * math.cos(to_long - from_long)

    bearing = math.degrees(math.atan2(x, y))
    if bearing < 0:
        bearing += 360.0
    return bearing


def cardinal_direction(
    from_key: str, to_key: str, data: ReferenceData = REFERENCE_DATA
) -> str | None:
    """One of 'north', 'east', 'south' or 'west' from one city to another."""
    bearing = heading(from_key, to_key, data)
    if bearing is None:
        return None

    if bearing > WEST_NORTH_BOUNDARY or bearing <= NORTH_EAST_BOUNDARY:
        return "north"
    if bearing <= EAST_SOUTH_BOUNDARY:
        return "east"
    if bearing <= SOUTH_WEST_BOUNDARY:
        return "south"
    return "west"
