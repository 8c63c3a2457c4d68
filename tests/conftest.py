"""Shared fixtures for the gravitydrop test suite."""

import pytest

from gravitydrop.debug import debug, DebugLevel
from gravitydrop.game.state import GameState


@pytest.fixture(autouse=True)
def quiet_debug():
    """Silence the shared logger and restore its level afterwards."""
    saved = debug.level
    debug.configure(level=DebugLevel.NONE)
    yield
    debug.configure(level=saved, components=[])


@pytest.fixture
def state10():
    return GameState(10, 10)


@pytest.fixture
def state7x6():
    return GameState(7, 6)

