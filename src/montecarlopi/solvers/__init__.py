from montecarlopi.solvers.experiment import Experiment, ExperimentState

__all__ = ["Experiment", "ExperimentState"]
