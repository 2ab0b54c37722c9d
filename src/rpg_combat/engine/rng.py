"""The single random stream behind every combat roll.

All engine randomness goes through one CombatRandom instance. Every
derived draw (ranges, choices, Bernoulli trials) is computed from
``random()``, so replaying the same stream against the same starting
state reproduces an encounter exactly, and a test can script the stream
by overriding that one method.
"""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from typing import TypeVar

from rpg_combat.core.logging import get_logger


logger = get_logger(__name__)

T = TypeVar("T")


class CombatRandom:
    """Seedable random stream for combat resolution.

    Example:
        >>> rng = CombatRandom(seed=42)
        >>> rng.chance(0.5) in (True, False)
        True
    """

    def __init__(self, seed: int | None = None) -> None:
        """Initialize the stream.

        Args:
            seed: Optional seed for reproducible encounters.
        """
        self._seed = seed
        self._random = random.Random()
        self._random.seed(seed)
        logger.debug("Combat random stream initialized", seed=seed)

    @property
    def seed(self) -> int | None:
        """Seed the stream was created with."""
        return self._seed

    def random(self) -> float:
        """Uniform float in ``[0, 1)``."""
        return self._random.random()

    def chance(self, probability: float) -> bool:
        """Bernoulli trial: True iff a fresh roll is below ``probability``."""
        return self.random() < probability

    def uniform(self, low: float, high: float) -> float:
        """Uniform float in ``[low, high)``."""
        return low + (high - low) * self.random()

    def randint(self, low: int, high: int) -> int:
        """Uniform integer in ``[low, high]``, inclusive on both ends."""
        if high <= low:
            return low
        value = low + math.floor(self.random() * (high - low + 1))
        return min(value, high)

    def choice(self, options: Sequence[T]) -> T:
        """Pick one element uniformly.

        Raises:
            IndexError: If ``options`` is empty.
        """
        if not options:
            raise IndexError("Cannot choose from an empty sequence")
        return options[self.randint(0, len(options) - 1)]


__all__ = ["CombatRandom"]
