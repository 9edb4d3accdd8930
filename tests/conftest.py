"""Pytest configuration and shared fixtures."""

import random
import sys
from pathlib import Path

import pytest

# Add the project root to the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tribody.config import SimConfig  # noqa: E402
from tribody.simulation import Simulation  # noqa: E402


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, start=100.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_sim(rng, clock):
    """Build an 800x600 Simulation with a seeded rng and the fake clock."""

    def _make(width=800, height=600, **config_overrides):
        events = []
        sim = Simulation(width, height, config=SimConfig(**config_overrides),
                         rng=rng, clock=clock, on_run_ended=events.append)
        sim.events = events
        return sim

    return _make
