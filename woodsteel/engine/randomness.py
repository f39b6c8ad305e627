"""Random sampling primitives for Wood & Steel.

Every probabilistic decision in the engine draws from a GameRandom so a
game can be replayed exactly from its seed.
"""

import math
import random
from collections.abc import Iterable, Mapping, Sequence
from typing import TypeVar

T = TypeVar("T")


class GameRandom(random.Random):
    """Seedable random source with the game's sampling helpers."""

    def weighted_random(self, weights: Mapping[T, int] | None) -> T | None:
        """Pick a key with probability proportional to its integer weight.

        Draws a uniform integer in [0, total) and returns the first key, in
        the mapping's iteration order, whose cumulative weight exceeds it.

        Args:
            weights: Choice to positive integer weight.

        Returns:
            The chosen key, or None for an empty mapping.
        """
        if not weights:
            return None
        total = sum(weights.values())
        if total <= 0:
            return None

        roll = self.randrange(total)
        cumulative = 0
        for choice, weight in weights.items():
            cumulative += weight
            if roll < cumulative:
                return choice
        return None

    def random_array_item(self, items: Sequence[T]) -> T | None:
        """Uniformly pick an item from a sequence, or None if it is empty."""
        if not items:
            return None
        return items[self.randrange(len(items))]

    def random_set_item(self, items: Iterable[T]) -> T | None:
        """Uniformly pick an item from any iterable, in iteration order."""
        return self.random_array_item(list(items))

    def gaussian_random(self) -> float:
        """Box-Muller draw intended to lie in [0, 1].

        The rare values outside that range fall back to a uniform draw
        rather than being clamped.
        """
        value = math.sqrt(-2.0 * math.log(1 - self.random())) * math.cos(
            2.0 * math.pi * self.random()
        )
        if value < 0.0 or value > 1.0:
            return self.random()
        return value

    def shuffle_array(self, items: Iterable[T]) -> list[T]:
        """Return a Fisher-Yates shuffled copy of items."""
        shuffled = list(items)
        for i in range(len(shuffled) - 1, 0, -1):
            j = self.randrange(i + 1)
            shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
        return shuffled

    def coin_flip(self) -> bool:
        """Fair coin."""
        return self.random() > 0.5


_default_rng = GameRandom()


def default_rng() -> GameRandom:
    """Shared unseeded generator used when callers don't inject one."""
    return _default_rng
