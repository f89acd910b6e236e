"""Shared fixtures for the nfasim test suite."""

import pytest

from nfasim.report import RecordingReporter
from nfasim.table import TransitionTable

from helpers import make_table


@pytest.fixture
def recorder() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def looping_table() -> TransitionTable:
    """Single state that loops on every symbol."""
    return make_table({(0, c): {0} for c in "0123"}, accepting=())
