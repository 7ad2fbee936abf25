import numpy as np
import pytest


class ScriptedRng:
    """Stands in for a numpy Generator, handing out pre-arranged draws"""

    def __init__(self, *draws):
        self.draws = list(draws)
        self.calls = []

    def integers(self, high):
        self.calls.append(high)
        value = self.draws.pop(0)
        assert 0 <= value < high
        return value


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def scripted_rng():
    return ScriptedRng
