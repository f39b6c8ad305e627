"""Player model for Wood & Steel."""

from dataclasses import dataclass, field


@dataclass
class Player:
    """Represents a player in the game.

    Attributes:
        id: Turn-order key ('0', '1', ...). Stable and never reused.
        name: Display name of the player.
        active_cities: Cities the player's network currently reaches,
            oldest first.
        hub_city: City chosen as the player's hub, if any.
        regional_office: Region code of the player's regional office, if any.
    """

    id: str
    name: str
    active_cities: list[str] = field(default_factory=list)
    hub_city: str | None = None
    regional_office: str | None = None

    @property
    def current_city(self) -> str | None:
        """Most recently added active city."""
        if not self.active_cities:
            return None
        return self.active_cities[-1]

    def add_city(self, city_key: str) -> bool:
        """Add a city to the player's network.

        Returns:
            True if the city was added, False if it was already active.
        """
        if city_key in self.active_cities:
            return False
        self.active_cities.append(city_key)
        return True

    def remove_city(self, city_key: str) -> None:
        """Remove every occurrence of a city from the player's network."""
        self.active_cities = [c for c in self.active_cities if c != city_key]
