import itertools

import pytest


class ScriptedRng:
    """Stands in for random.Random, replaying a fixed cycle of values."""

    def __init__(self, *values):
        self._values = itertools.cycle(values)

    def random(self):
        return next(self._values)

    def uniform(self, a, b):
        # Values are given directly in the requested range.
        return next(self._values)

    def randint(self, a, b):
        return int(next(self._values))


@pytest.fixture
def scripted_rng():
    return ScriptedRng
