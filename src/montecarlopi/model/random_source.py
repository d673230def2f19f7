"""
Random Source
=============
Uniform draws over closed intervals, backed by an injected NumPy generator.

Why is this file needed?
------------------------
1. Closed intervals: `numpy.random.Generator.uniform` samples [low, high).
   The simulation needs [low, high], so a 32-bit integer is drawn inclusively
   and scaled, which makes both endpoints reachable.
2. Testability: the generator is passed in (or seeded) explicitly instead of
   living in process-wide state, so a fixed seed reproduces a whole run.
"""
from __future__ import annotations

from typing import Optional

import numpy as np

from montecarlopi.config import UNIFORM_RESOLUTION
from montecarlopi.errors import InvalidRangeError


class RandomSource:
    """
    Produces uniformly distributed numbers from closed intervals.
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the source.

        Args:
            rng: Generator to draw from. Takes precedence over `seed`.
            seed: Seed for a fresh `numpy.random.default_rng` when `rng` is None.
        """
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(rng={self.rng!r})"

    def uniform(self, low: float, high: float) -> float:
        """
        Draw a real number uniformly from [low, high].

        Args:
            low: Lower bound (inclusive).
            high: Upper bound (inclusive).

        Raises:
            InvalidRangeError: If `low` > `high`.

        Returns:
            The drawn value.
        """
        if low > high:
            raise InvalidRangeError(low, high)
        step = int(self.rng.integers(0, UNIFORM_RESOLUTION, endpoint=True))
        t = step / UNIFORM_RESOLUTION
        # Weighted form stays finite when high - low exceeds the float range
        value = low * (1 - t) + high * t
        # Rounding can step just past either bound
        return min(max(value, low), high)

    def integer(self, low: int, high: int) -> int:
        """
        Draw an integer uniformly from [low, high].

        Raises:
            InvalidRangeError: If `low` > `high`.
        """
        if low > high:
            raise InvalidRangeError(low, high)
        return int(self.rng.integers(low, high, endpoint=True))

    def generate(self) -> float:
        """Draw from [0, 1]."""
        return self.uniform(0.0, 1.0)
