"""
Monte Carlo estimation of pi.

Random points are drawn inside a square; the fraction landing inside the
inscribed circle, times four, approaches pi.
"""
from montecarlopi.errors import (
    EmptyExperimentError,
    ExperimentStateError,
    FrozenTrialError,
    InvalidConfigurationError,
    InvalidRangeError,
    MonteCarloError,
)
from montecarlopi.model import Circle, Point, RandomSource, Square, Trial
from montecarlopi.solvers import Experiment, ExperimentState

__all__ = [
    "Circle",
    "EmptyExperimentError",
    "Experiment",
    "ExperimentState",
    "ExperimentStateError",
    "FrozenTrialError",
    "InvalidConfigurationError",
    "InvalidRangeError",
    "MonteCarloError",
    "Point",
    "RandomSource",
    "Square",
    "Trial",
]
