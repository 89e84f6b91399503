#!/usr/bin/env python3
"""
Random Sources
==============
Injectable randomness for the word generator.

Every generator takes its random source as an explicit argument, so tests
can pass a seeded or deterministic source while production code draws from
the system CSPRNG.

Sources:
- RandomSource(seed=None): secrets.SystemRandom (unseeded, not reproducible)
- RandomSource(seed=42): random.Random(42) (reproducible)
- GreedySource(): always the highest-weight candidate
"""

import random
import secrets
from typing import Any, List, Optional, Tuple


class RandomSource:
    """
    Random number source for sampling.

    A seeded source is fully reproducible, including the children it spawns
    for parallel workers.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        if seed is None:
            self._rng = secrets.SystemRandom()
        else:
            self._rng = random.Random(seed)

    @property
    def seeded(self) -> bool:
        return self.seed is not None

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self._rng.random()

    def randint(self, a: int, b: int) -> int:
        """Return random integer N such that a <= N <= b."""
        return self._rng.randint(a, b)

    def weighted_choice(self, items: List[Tuple[Any, float]]) -> Tuple[Any, float]:
        """
        Choose from items with probability proportional to weight.

        Args:
            items: List of (item, weight) tuples with positive weights

        Returns:
            The chosen (item, weight) pair
        """
        if not items:
            raise IndexError("Cannot choose from empty sequence")

        total = sum(w for _, w in items)
        r = self.random() * total

        for item, weight in items:
            r -= weight
            if r <= 0:
                return item, weight

        return items[-1]  # float round-off

    def spawn(self) -> 'RandomSource':
        """Independent child source (deterministic if this one is seeded)."""
        if self.seed is None:
            return RandomSource()
        return RandomSource(self._rng.getrandbits(64))


class GreedySource(RandomSource):
    """Deterministic policy: always take the highest-weight candidate."""

    def __init__(self):
        super().__init__(seed=0)

    def randint(self, a: int, b: int) -> int:
        return a

    def weighted_choice(self, items: List[Tuple[Any, float]]) -> Tuple[Any, float]:
        if not items:
            raise IndexError("Cannot choose from empty sequence")
        best = items[0]
        for item in items[1:]:
            if item[1] > best[1]:
                best = item
        return best

    def spawn(self) -> 'GreedySource':
        return GreedySource()


# Global instance
_system_random = RandomSource()


def get_rng() -> RandomSource:
    """Get the shared unseeded source."""
    return _system_random
