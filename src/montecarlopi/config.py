"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (the pi reference, the resolution of
   the uniform draw, the example experiment) scattered throughout the code.
2. Parity: Every estimate and percent error is measured against the same
   double-precision pi.

Exports:
    PI_REFERENCE (float): The value estimates are compared against.
    UNIFORM_RESOLUTION (int): Largest integer drawn by `RandomSource.uniform`.
    DEFAULT_* : Parameters of the example experiment run by `main()`.
"""
import math
from typing import Tuple

PI_REFERENCE: float = math.pi

# Same granularity as a 32-bit unsigned draw: k / (2**32 - 1) covers [0, 1]
UNIFORM_RESOLUTION: int = 2**32 - 1

# Example experiment
DEFAULT_SQUARE_CENTER: Tuple[float, float] = (0.0, 0.0)
DEFAULT_SQUARE_SIDE_LENGTH: float = 2.0
DEFAULT_N_TRIALS: int = 10
DEFAULT_POINTS_PER_TRIAL: int = 100
