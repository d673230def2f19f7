from __future__ import annotations

from dataclasses import dataclass, field
from fractions import Fraction

from montecarlopi.errors import FrozenTrialError, InvalidConfigurationError
from montecarlopi.utils import estimate_pi, percent_error


@dataclass
class Trial:
    """
    One batch of sampled points.

    Built up by `record` during a single sampling pass, then frozen once it is
    stored by an experiment. The estimate and its error are recomputed from the
    counters on every access.
    """
    points_inside: int = 0
    total_points: int = 0
    _frozen: bool = field(default=False, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not 0 <= self.points_inside <= self.total_points:
            raise InvalidConfigurationError(
                f"Trial counts must satisfy 0 <= points_inside <= total_points, "
                f"got {self.points_inside} inside of {self.total_points}."
            )

    def __setattr__(self, name: str, value: object) -> None:
        # Once frozen, no field (the flag included) may change
        if getattr(self, "_frozen", False):
            raise FrozenTrialError(f"Cannot set '{name}' on a completed trial.")
        super().__setattr__(name, value)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        self._frozen = True

    def record(self, inside: bool) -> None:
        """Count one sampled point; `inside` tells whether it hit the circle."""
        if self._frozen:
            raise FrozenTrialError("Cannot record points into a completed trial.")
        self.total_points += 1
        if inside:
            self.points_inside += 1

    @property
    def estimated_pi(self) -> float:
        """4 * points_inside / total_points, NaN before any point is recorded."""
        return estimate_pi(self.points_inside, self.total_points)

    @property
    def percent_error(self) -> float:
        return percent_error(self.estimated_pi)

    @property
    def exact_estimate(self) -> Fraction:
        """The estimate as an exact ratio, used for drift-free aggregation."""
        if self.total_points == 0:
            raise ZeroDivisionError("Trial has no recorded points.")
        return Fraction(4 * self.points_inside, self.total_points)
