"""
Application Entry
=================
Runs the example experiment and reports the results.

Why is this file needed?
------------------------
It acts as the composition root. It:
1. Configures logging (the library modules never do).
2. Builds the example Experiment from the defaults in `config`.
3. Runs it and logs the per-trial and aggregate results.
"""
import logging

from montecarlopi.config import (
    DEFAULT_N_TRIALS,
    DEFAULT_POINTS_PER_TRIAL,
    DEFAULT_SQUARE_CENTER,
    DEFAULT_SQUARE_SIDE_LENGTH,
)
from montecarlopi.logging_config import setup_logging
from montecarlopi.solvers.experiment import Experiment

logger = logging.getLogger("montecarlopi.main")


def main() -> Experiment:
    # Use logging.DEBUG to see every trial as it completes
    setup_logging(level=logging.INFO)

    experiment = Experiment(
        square_center=DEFAULT_SQUARE_CENTER,
        square_side_length=DEFAULT_SQUARE_SIDE_LENGTH,
        n_trials=DEFAULT_N_TRIALS,
        points_per_trial=DEFAULT_POINTS_PER_TRIAL,
    )
    experiment.run()

    for line in experiment.summary().splitlines():
        logger.info(line)

    return experiment


if __name__ == "__main__":
    main()
