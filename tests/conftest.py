"""
Pytest fixtures for Typing Tug tests.
"""
import random

import pytest

from typing_tug.config import get_settings
from typing_tug.gameplay.effects import ManualClock
from typing_tug.gameplay.engine import TugOfWarEngine


@pytest.fixture
def clock():
    """Manual clock starting at t=1000ms."""
    return ManualClock(start_ms=1000)


@pytest.fixture
def make_engine(clock):
    """Factory for seeded engines sharing the manual clock."""
    def _make(seed: int = 42, **kwargs) -> TugOfWarEngine:
        return TugOfWarEngine(clock=clock, rng=random.Random(seed), **kwargs)
    return _make


@pytest.fixture
def engine(make_engine):
    """A started engine."""
    engine = make_engine()
    engine.start()
    engine.pop_events()
    return engine


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
