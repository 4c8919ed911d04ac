"""
Random sources for revelation draws and template selection.

Every random decision in the engine goes through one of these so tests
can seed or pin the outcome.
"""

import random
from typing import Sequence, TypeVar

T = TypeVar("T")


class RandomSource:
    """Seedable uniform random source."""

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def chance(self, probability: float) -> bool:
        """
        Bernoulli draw.

        Args:
            probability: Success probability. <= 0 never succeeds, >= 1 always does.

        Returns:
            True on success
        """
        if probability <= 0:
            return False
        if probability >= 1:
            return True
        return self._rng.random() < probability

    def choice(self, options: Sequence[T]) -> T:
        """Pick one element uniformly."""
        return self._rng.choice(options)


class FixedRandomSource:
    """
    Deterministic random source for testing.

    Every draw returns the same outcome and choice() always picks the
    first option, so there is no template variety.
    """

    def __init__(self, outcome: bool = True):
        self.outcome = outcome
        self.draws: list[float] = []  # Probabilities requested, for assertions

    def chance(self, probability: float) -> bool:
        self.draws.append(probability)
        return self.outcome

    def choice(self, options: Sequence[T]) -> T:
        return options[0]
