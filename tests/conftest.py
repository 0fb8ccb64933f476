"""Pytest configuration and shared fixtures."""

import pytest

from orchestra.engine import Orchestra, empty_schedule
from orchestra.models import Instrument, Musician


@pytest.fixture
def orchestra() -> Orchestra:
    return Orchestra("Test", set(), empty_schedule(7), set())


@pytest.fixture
def make_musician():
    def _make(name="Musician", instrument=Instrument.BASSOON, price=100):
        return Musician(name=name, instrument=instrument, description="Loves tests",
                        experience=3, price=price)
    return _make
