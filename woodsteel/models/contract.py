"""Contract model for Wood & Steel."""

import time
from dataclasses import dataclass, field
from enum import Enum


class ContractType(Enum):
    """Kinds of contract."""

    PRIVATE = "private"  # Held by one player
    MARKET = "market"  # Open to all players until fulfilled


@dataclass
class Contract:
    """A reward for delivering a commodity to a destination city.

    Attributes:
        id: Unique contract identifier.
        destination_key: Key of the destination city.
        commodity: Commodity to deliver.
        type: Private or market contract.
        fulfilled: Whether the contract has been fulfilled.
        player_id: Holding player, or None for an unclaimed market contract.
        creation_time: Creation timestamp in milliseconds.
    """

    id: str
    destination_key: str
    commodity: str
    type: ContractType = ContractType.MARKET
    fulfilled: bool = False
    player_id: str | None = None
    creation_time: int = field(default_factory=lambda: int(time.time() * 1000))

    @property
    def key(self) -> str:
        """Composite commodity|destination key used for duplicate checks."""
        return f"{self.commodity}|{self.destination_key}"

    @property
    def is_market(self) -> bool:
        """Check if this is a market contract."""
        return self.type == ContractType.MARKET


@dataclass(frozen=True)
class PrivateContractSpec:
    """A commodity and destination offered to a player, not yet a contract."""

    commodity: str
    destination_key: str

    @property
    def key(self) -> str:
        """Composite commodity|destination key used for duplicate checks."""
        return f"{self.commodity}|{self.destination_key}"
