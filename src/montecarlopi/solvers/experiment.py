"""
Monte Carlo Experiment
======================
The estimation driver of the simulation.

Why is this file needed?
------------------------
1. Sampling: It runs the point-generation loop (n_trials x points_per_trial)
   against one fixed Square and its inscribed Circle.
2. Bookkeeping: It keeps the completed trials in execution order and freezes
   each one as it is stored.
3. Statistics: It derives the aggregate estimate and percent error on demand.

State machine:
    CONFIGURED -> RUNNING -> COMPLETE, driven by a single blocking `run()`.
"""
from __future__ import annotations

import logging
import math
import numbers
from enum import StrEnum
from typing import TYPE_CHECKING, Callable, Optional, Tuple, Union

import numpy as np

from montecarlopi.config import PI_REFERENCE
from montecarlopi.errors import EmptyExperimentError, ExperimentStateError, InvalidConfigurationError
from montecarlopi.model.geometry_primitives import Point, Square
from montecarlopi.model.random_source import RandomSource
from montecarlopi.model.trial import Trial

if TYPE_CHECKING:
    import numpy.typing as npt
    from matplotlib.figure import Figure

logger = logging.getLogger(__name__)


class ExperimentState(StrEnum):
    CONFIGURED = "configured"
    RUNNING = "running"
    COMPLETE = "complete"


class Experiment:
    """
    Class for a Monte Carlo estimation of pi.
    """

    def __init__(
        self,
        square_center: Union[Point, Tuple[float, float]],
        square_side_length: float,
        n_trials: int,
        points_per_trial: int,
        *,
        random_source: Optional[RandomSource] = None,
    ) -> None:
        """
        Configure the experiment. The square and its inscribed circle are
        fixed here and never change afterwards.

        Args:
            square_center: Center of the sampling square, a Point or an (x, y) pair.
            square_side_length: Side of the sampling square, must be positive.
            n_trials: Number of trials to run, at least 1.
            points_per_trial: Number of points sampled per trial, at least 1.
            random_source: Source of the coordinate draws. A fresh unseeded one
                is created when omitted.

        Raises:
            InvalidConfigurationError: If any parameter is out of range or a
                count is not an integer.
        """
        for name, value in (("n_trials", n_trials), ("points_per_trial", points_per_trial)):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidConfigurationError(f"'{name}' must be an integer, got {value!r}.")
        if n_trials < 1:
            raise InvalidConfigurationError(f"'n_trials' must be at least 1, got {n_trials}.")
        if points_per_trial < 1:
            raise InvalidConfigurationError(f"'points_per_trial' must be at least 1, got {points_per_trial}.")

        if not isinstance(square_center, Point):
            square_center = Point(*square_center)

        self.square = Square(center=square_center, side=square_side_length)
        self.circle = self.square.inscribed_circle()
        self.n_trials = n_trials
        self.points_per_trial = points_per_trial
        self.random_source = random_source if random_source is not None else RandomSource()

        self.state = ExperimentState.CONFIGURED
        self._trials: list[Trial] = []

        logger.debug(f"Configured {self!r}")

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(square={self.square}, n_trials={self.n_trials}, "
            f"points_per_trial={self.points_per_trial}, state={self.state})"
        )

    @property
    def trials(self) -> Tuple[Trial, ...]:
        """Completed trials in execution order."""
        return tuple(self._trials)

    def run(self, callback: Optional[Callable[[int], None]] = None) -> None:
        """
        Sample all trials. Blocks until every point has been drawn.

        Args:
            callback: Optional function receiving the completion percentage
                after each trial.

        Raises:
            ExperimentStateError: If the experiment has already been run.
        """
        if self.state is not ExperimentState.CONFIGURED:
            raise ExperimentStateError(f"Experiment can only be run once (state: {self.state}).")

        self.state = ExperimentState.RUNNING
        logger.info(
            f"Running {self.n_trials} trial(s) of {self.points_per_trial:,} points "
            f"in a square of side {self.square.side} centered at ({self.square.center.x}, {self.square.center.y})."
        )

        for index in range(self.n_trials):
            trial = self._sample_trial()
            trial.freeze()
            self._trials.append(trial)

            logger.debug(
                f"Trial {index + 1}/{self.n_trials}: {trial.points_inside}/{trial.total_points} inside, "
                f"pi ~ {trial.estimated_pi:.6f} ({trial.percent_error:.4f} %)"
            )
            if callback is not None:
                callback(int((index + 1) / self.n_trials * 100))

        self.state = ExperimentState.COMPLETE
        logger.info(
            f"Finished: average pi ~ {self.average_estimated_pi:.6f} "
            f"(average error {self.average_percent_error:.4f} %)"
        )

    def _sample_trial(self) -> Trial:
        trial = Trial()
        for _ in range(self.points_per_trial):
            point = self.square.generate_random_inside_point(self.random_source)
            trial.record(self.circle.contains(point))
        return trial

    def _require_trials(self) -> None:
        if not self._trials:
            raise EmptyExperimentError("No completed trials; call run() first.")

    @property
    def sum_estimated_pi(self) -> float:
        self._require_trials()
        return float(sum(trial.exact_estimate for trial in self._trials))

    @property
    def average_estimated_pi(self) -> float:
        """
        Mean of the trial estimates.

        Summed as exact ratios of the trial counters and rounded once, so the
        result does not depend on the order of the trials.
        """
        self._require_trials()
        return float(sum(trial.exact_estimate for trial in self._trials) / len(self._trials))

    @property
    def average_percent_error(self) -> float:
        """Mean of the per-trial percent errors."""
        self._require_trials()
        return math.fsum(trial.percent_error for trial in self._trials) / len(self._trials)

    @property
    def estimates(self) -> npt.NDArray[np.float64]:
        return np.array([trial.estimated_pi for trial in self._trials], dtype=np.float64)

    def summary(self) -> str:
        """Text report of every trial and the aggregate statistics."""
        self._require_trials()
        lines = [f"{'Trial':>5}  {'Inside':>10}  {'Total':>10}  {'Estimate':>10}  {'Error %':>8}"]
        for index, trial in enumerate(self._trials, start=1):
            lines.append(
                f"{index:>5}  {trial.points_inside:>10}  {trial.total_points:>10}  "
                f"{trial.estimated_pi:>10.6f}  {trial.percent_error:>8.4f}"
            )
        lines.append(f"Average estimate:      {self.average_estimated_pi:.6f}")
        lines.append(f"Average percent error: {self.average_percent_error:.4f} %")
        return "\n".join(lines)

    def plot_estimates(self, show: bool = True) -> Figure:
        """Plot each trial's estimate against the reference pi."""
        import matplotlib.pyplot as plt

        self._require_trials()

        trial_numbers = np.arange(1, len(self._trials) + 1)

        fig, ax = plt.subplots(figsize=(10, 5))
        ax.plot(trial_numbers, self.estimates, marker='o', linestyle='', label='Trial estimate')
        ax.axhline(self.average_estimated_pi, color='tab:orange', label='Average estimate')
        ax.axhline(PI_REFERENCE, color='black', linestyle='--', label='π')
        ax.set_title(f'Monte Carlo estimates of π ({self.points_per_trial:,} points per trial)')
        ax.set_xlabel('Trial')
        ax.set_ylabel('Estimate')
        ax.grid(True)
        ax.legend()
        if show:
            plt.show()
        return fig
