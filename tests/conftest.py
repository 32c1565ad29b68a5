"""Shared fixtures for the test suite."""

import pytest

from tesselate.config import GameSettings
from tesselate.core import Board, BoardRules, GameEngine, LayoutPattern


class ScriptedRandom:
    """Random source that replays a fixed list of floats, cycling when exhausted."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


def die(value):
    """Float that makes a six-sided die roll ``value``."""
    return (value - 1) / 6 + 0.01


@pytest.fixture
def settings():
    return GameSettings()


@pytest.fixture
def square_points():
    """The 5x5 square grid, spacing 70, centred on (450, 260)."""
    return [[450 + col * 70, 260 + row * 70] for row in range(-2, 3) for col in range(-2, 3)]


@pytest.fixture
def square_board(square_points):
    return Board(square_points, BoardRules(), pattern="square_grid")


@pytest.fixture
def make_engine(settings):
    """Factory for an engine on the square grid with scripted dice."""

    def _make(*rolls):
        prng = ScriptedRandom([die(r) for r in rolls] or [die(6)])
        return GameEngine(settings, prng=prng, pattern=LayoutPattern.SQUARE_GRID)

    return _make


@pytest.fixture
def scripted():
    """The ScriptedRandom class, for tests that build their own sequences."""
    return ScriptedRandom
