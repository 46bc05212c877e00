"""Pytest fixtures for Asteroid Dodge tests."""
import os

# pygame must never open a real window or audio device under test
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pytest

from models import DodgeSettings, Resolution
from arcade.persistence import MemoryBestScoreStore
from games.AsteroidDodge.simulation import SimulationEngine

# Above every default spawn chance, so nothing ever spawns
NO_SPAWN = 0.999


def constant_rng(value):
    """Random source that always returns the same draw."""
    return lambda: value


def sequence_rng(values):
    """Random source that replays values in order, then repeats the last one."""
    values = list(values)
    state = {'i': 0}

    def draw():
        i = min(state['i'], len(values) - 1)
        state['i'] += 1
        return values[i]

    draw.calls = lambda: state['i']
    return draw


@pytest.fixture
def settings():
    return DodgeSettings()


@pytest.fixture
def viewport():
    return Resolution(width=800, height=600)


@pytest.fixture
def store():
    return MemoryBestScoreStore()


@pytest.fixture
def engine(settings, store):
    """Engine whose random source never triggers a spawn."""
    return SimulationEngine(settings=settings, store=store, rng=constant_rng(NO_SPAWN))


@pytest.fixture
def running_engine(engine):
    engine.start()
    return engine
