"""Pytest configuration and fixtures for knapevo tests."""

import random

import pytest

from knapevo.problems.catalog import REFERENCE_PROBLEM


class ScriptedRandom(random.Random):
    """Random source replaying fixed values, for driving operators exactly."""

    def __init__(self, floats=(), ints=(), samples=()):
        super().__init__(0)
        self.floats = list(floats)
        self.ints = list(ints)
        self.samples = list(samples)

    def random(self):
        return self.floats.pop(0)

    def randrange(self, start, stop=None, step=1):
        value = self.ints.pop(0)
        upper = start if stop is None else stop
        assert value < upper, f"scripted {value} outside range({upper})"
        return value

    def sample(self, population, k, **kwargs):
        picked = self.samples.pop(0)
        assert len(picked) == k
        return list(picked)


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def problem():
    return REFERENCE_PROBLEM


@pytest.fixture
def make_population(problem):
    def _make(*chromosomes):
        return [problem.evaluate(c) for c in chromosomes]

    return _make


@pytest.fixture
def scripted_rng():
    """Factory for ScriptedRandom instances."""
    return ScriptedRandom
