import pytest

from montecarlopi.model.random_source import RandomSource

SEED = 20160314


@pytest.fixture
def random_source():
    """A reproducible source for statistical checks."""
    return RandomSource(seed=SEED)


class ScriptedGenerator:
    """Stands in for numpy.random.Generator, replaying fixed integer draws."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.calls = []

    def integers(self, low, high, endpoint=False):
        self.calls.append((low, high, endpoint))
        return self.draws.pop(0)


@pytest.fixture
def scripted_generator():
    return ScriptedGenerator
