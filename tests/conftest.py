import itertools

import numpy as np
import pytest


class ScriptedRng:
    """Stand-in for ``np.random.Generator`` that replays fixed draws."""

    def __init__(self, draws):
        self._draws = iter(draws)

    def integers(self, *args, **kwargs):
        return next(self._draws)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def ids():
    return itertools.count(1)


@pytest.fixture
def scripted():
    return ScriptedRng
