"""
Exceptions raised by the simulation.

Every error derives from `MonteCarloError` and from the closest builtin, so
callers may catch either (e.g. `InvalidRangeError` is also a `ValueError`).
"""


class MonteCarloError(Exception):
    """Base class for all simulation errors."""


class InvalidRangeError(MonteCarloError, ValueError):
    """A random interval was requested with `low > high`."""

    def __init__(self, low: float, high: float) -> None:
        super().__init__(f"Invalid interval [{low}, {high}]: 'low' must not exceed 'high'.")
        self.low = low
        self.high = high


class InvalidConfigurationError(MonteCarloError, ValueError):
    """A shape or experiment was configured with out-of-range parameters."""


class EmptyExperimentError(MonteCarloError, ZeroDivisionError):
    """An aggregate statistic was requested before any trial completed."""


class ExperimentStateError(MonteCarloError, RuntimeError):
    """An experiment operation is not allowed in its current state."""


class FrozenTrialError(MonteCarloError, RuntimeError):
    """A completed trial was modified."""
