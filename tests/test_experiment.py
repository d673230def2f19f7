import math

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest

from montecarlopi.errors import (
    EmptyExperimentError,
    ExperimentStateError,
    FrozenTrialError,
    InvalidConfigurationError,
)
from montecarlopi.model.geometry_primitives import Point
from montecarlopi.model.random_source import RandomSource
from montecarlopi.model.trial import Trial
from montecarlopi.solvers.experiment import Experiment, ExperimentState


def make_experiment(**overrides):
    params = dict(
        square_center=(0.0, 0.0),
        square_side_length=2.0,
        n_trials=4,
        points_per_trial=250,
        random_source=RandomSource(seed=1),
    )
    params.update(overrides)
    return Experiment(**params)


def completed_trial(points_inside, total_points):
    trial = Trial(points_inside, total_points)
    trial.freeze()
    return trial


@pytest.mark.parametrize(
    "overrides",
    [
        {"square_side_length": 0.0},
        {"square_side_length": -1.0},
        {"n_trials": 0},
        {"n_trials": -3},
        {"points_per_trial": 0},
        {"n_trials": 2.5},
        {"n_trials": True},
        {"points_per_trial": "100"},
        {"points_per_trial": 10.0},
    ],
)
def test_invalid_configuration(overrides):
    with pytest.raises(InvalidConfigurationError):
        make_experiment(**overrides)


def test_configured_state():
    experiment = make_experiment(square_center=Point(1.0, 2.0), square_side_length=3.0)

    assert experiment.state == ExperimentState.CONFIGURED
    assert experiment.trials == ()
    assert experiment.square.center == Point(1.0, 2.0)
    assert experiment.circle.center == Point(1.0, 2.0)
    assert experiment.circle.radius == 1.5


def test_center_accepts_pair():
    assert make_experiment(square_center=(4.0, -1.0)).square.center == Point(4.0, -1.0)


def test_default_random_source():
    experiment = Experiment((0.0, 0.0), 2.0, 1, 1)

    assert isinstance(experiment.random_source, RandomSource)


@pytest.mark.parametrize("attribute", ["sum_estimated_pi", "average_estimated_pi", "average_percent_error"])
def test_aggregates_require_trials(attribute):
    experiment = make_experiment()

    with pytest.raises(EmptyExperimentError):
        getattr(experiment, attribute)

    with pytest.raises(ZeroDivisionError):
        getattr(experiment, attribute)


def test_summary_and_plot_require_trials():
    experiment = make_experiment()

    with pytest.raises(EmptyExperimentError):
        experiment.summary()
    with pytest.raises(EmptyExperimentError):
        experiment.plot_estimates(show=False)


def test_run_fills_trials():
    experiment = make_experiment()

    experiment.run()

    assert experiment.state == ExperimentState.COMPLETE
    assert len(experiment.trials) == 4
    for trial in experiment.trials:
        assert trial.total_points == 250
        assert 0 <= trial.points_inside <= trial.total_points
        assert trial.frozen


def test_trials_are_read_only():
    experiment = make_experiment(n_trials=1, points_per_trial=10)
    experiment.run()

    assert isinstance(experiment.trials, tuple)
    with pytest.raises(AttributeError):
        experiment.trials.append(Trial())


def test_stored_trials_cannot_be_changed():
    experiment = make_experiment(n_trials=2, points_per_trial=20)
    experiment.run()
    before = experiment.average_estimated_pi

    with pytest.raises(FrozenTrialError):
        experiment.trials[0].points_inside = 10_000
    with pytest.raises(FrozenTrialError):
        experiment.trials[1].total_points = 1

    assert experiment.average_estimated_pi == before


def test_integer_like_counts_are_accepted():
    experiment = make_experiment(n_trials=np.int64(2), points_per_trial=np.int32(5))
    experiment.run()

    assert len(experiment.trials) == 2


def test_run_only_once():
    experiment = make_experiment(n_trials=1, points_per_trial=10)
    experiment.run()

    with pytest.raises(ExperimentStateError):
        experiment.run()

    assert len(experiment.trials) == 1


def test_run_reports_progress():
    progress = []
    experiment = make_experiment(n_trials=4, points_per_trial=10)

    experiment.run(callback=progress.append)

    assert progress == [25, 50, 75, 100]


def test_same_seed_same_trials():
    first = make_experiment(random_source=RandomSource(seed=42))
    second = make_experiment(random_source=RandomSource(seed=42))

    first.run()
    second.run()

    assert [t.points_inside for t in first.trials] == [t.points_inside for t in second.trials]


def test_aggregation_is_exact():
    experiment = make_experiment()
    # 3/4, 4/5 and 17/20 of the points inside give 3.0, 3.2 and 3.4
    experiment._trials.extend([completed_trial(3, 4), completed_trial(4, 5), completed_trial(17, 20)])

    assert experiment.estimates.tolist() == [3.0, 3.2, 3.4]
    assert experiment.average_estimated_pi == 3.2
    assert experiment.sum_estimated_pi == 9.6
    expected_error = sum(abs(v - math.pi) / math.pi * 100 for v in (3.0, 3.2, 3.4)) / 3
    assert experiment.average_percent_error == pytest.approx(expected_error)


def test_average_percent_error_matches_trials():
    experiment = make_experiment()
    experiment.run()

    mean_error = sum(t.percent_error for t in experiment.trials) / len(experiment.trials)
    assert experiment.average_percent_error == pytest.approx(mean_error)


def test_offset_square_still_estimates_pi():
    experiment = make_experiment(
        square_center=(5.0, -3.0),
        square_side_length=4.0,
        n_trials=2,
        points_per_trial=20_000,
    )

    experiment.run()

    assert experiment.average_estimated_pi == pytest.approx(math.pi, abs=0.1)


def test_million_points_estimate():
    experiment = Experiment(
        square_center=(0.0, 0.0),
        square_side_length=2.0,
        n_trials=1,
        points_per_trial=1_000_000,
        random_source=RandomSource(seed=2024),
    )

    experiment.run()

    assert len(experiment.trials) == 1
    assert experiment.trials[0].total_points == 1_000_000
    assert experiment.average_estimated_pi == pytest.approx(3.14159, abs=0.05)


def test_summary_lists_trials():
    experiment = make_experiment(n_trials=3, points_per_trial=50)
    experiment.run()

    summary = experiment.summary()

    assert len(summary.splitlines()) == 1 + 3 + 2
    assert "Average estimate" in summary
    assert "Average percent error" in summary


def test_plot_estimates():
    experiment = make_experiment(n_trials=3, points_per_trial=50)
    experiment.run()

    fig = experiment.plot_estimates(show=False)

    ax = fig.axes[0]
    assert ax.get_xlabel() == "Trial"
    assert ax.lines[0].get_ydata().tolist() == experiment.estimates.tolist()
    plt.close(fig)
