"""Shared pytest fixtures and markers for all tests."""

import random

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


class ScriptedRng:
    """Stand-in for random.Random that replays fixed die faces.

    randint() cycles through ``rolls``, randrange() always returns
    ``start`` and random() always returns ``draw``.
    """

    def __init__(self, rolls, start=0, draw=0.0):
        self.rolls = list(rolls)
        self.start = start
        self.draw = draw
        self.randint_calls = 0
        self.random_calls = 0

    def randint(self, a, b):
        value = self.rolls[self.randint_calls % len(self.rolls)]
        self.randint_calls += 1
        assert a <= value <= b
        return value

    def randrange(self, n):
        return self.start

    def random(self):
        self.random_calls += 1
        return self.draw


@pytest.fixture
def rng():
    """Provide a seeded random generator."""
    return random.Random(12345)


@pytest.fixture
def scripted_rng():
    """Factory for ScriptedRng instances."""
    return ScriptedRng
