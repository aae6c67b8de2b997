"""Shared fixtures for Trailguide tests."""

import os
import sys

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from trailguide.audio import Audio
from trailguide.logger import Logger
from trailguide.models import Path

# One degree of arc on the mean-radius sphere
METERS_PER_DEGREE = 6371000 * 3.141592653589793 / 180


@pytest.fixture
def equator_path() -> Path:
    """Two-point trail running east along the equator, about 1.1 km long"""
    return Path.from_points([(0.0, 0.0), (0.0, 0.01)], name="equator")


@pytest.fixture
def long_path() -> Path:
    """Two-point trail one degree long, as used in the walk-through scenario"""
    return Path.from_points([(0.0, 0.0), (0.0, 1.0)], name="long")


@pytest.fixture
def messages() -> list:
    return []


@pytest.fixture
def quiet_logger(messages) -> Logger:
    return Logger(callback=lambda message, data: messages.append((message, data)), echo=False)


@pytest.fixture
def spoken() -> list:
    return []


@pytest.fixture
def silent_audio(spoken) -> Audio:
    return Audio(enabled=False, callback=spoken.append)
