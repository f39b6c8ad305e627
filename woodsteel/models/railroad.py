"""Independent railroad model for Wood & Steel."""

from dataclasses import dataclass, field


@dataclass
class IndependentRailroad:
    """A non-player railroad company occupying a cluster of routes.

    Attributes:
        name: Generated company name, unique within a game.
        routes: Keys of owned routes, in acquisition order.
    """

    name: str
    routes: list[str] = field(default_factory=list)

    def owns(self, route_key: str) -> bool:
        """Check if the railroad owns a route."""
        return route_key in self.routes

    def add_route(self, route_key: str) -> None:
        """Append a route to the railroad."""
        if route_key in self.routes:
            raise ValueError(f"{self.name} already owns {route_key}")
        self.routes.append(route_key)
