"""
Geometric Primitives for the sampling domain.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, TYPE_CHECKING
import numpy as np
import math

from montecarlopi.errors import InvalidConfigurationError

if TYPE_CHECKING:
    import numpy.typing as npt

    from montecarlopi.model.random_source import RandomSource


@dataclass(frozen=True)
class Point:
    """A simple geometric point in 2D space."""
    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y])


@dataclass(frozen=True)
class Circle:
    """A circle given by its center and radius."""
    center: Point
    radius: float

    def __post_init__(self) -> None:
        if not self.radius > 0.0:
            raise InvalidConfigurationError(f"Circle radius must be positive, got {self.radius}.")

    def contains(self, point: Point) -> bool:
        """
        Check whether `point` lies inside the circle.

        A point exactly on the circumference counts as inside.
        """
        return self.center.distance_to(point) <= self.radius


@dataclass(frozen=True)
class Square:
    """An axis-aligned square given by its center and side length."""
    center: Point
    side: float

    def __post_init__(self) -> None:
        if not self.side > 0.0:
            raise InvalidConfigurationError(f"Square side must be positive, got {self.side}.")

    @property
    def half_side(self) -> float:
        return self.side / 2

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """(x_min, x_max, y_min, y_max) of the square."""
        h = self.half_side
        return (
            self.center.x - h,
            self.center.x + h,
            self.center.y - h,
            self.center.y + h,
        )

    def inscribed_circle(self) -> Circle:
        """The largest circle fitting inside the square (same center, radius side/2)."""
        return Circle(center=self.center, radius=self.half_side)

    def generate_random_inside_point(self, rng: RandomSource) -> Point:
        """
        Draw a point uniformly from the square, boundary included.

        Args:
            rng: Source of the two coordinate draws.

        Returns:
            The drawn point.
        """
        x_min, x_max, y_min, y_max = self.bounds
        x = rng.uniform(x_min, x_max)
        y = rng.uniform(y_min, y_max)
        return Point(x, y)
