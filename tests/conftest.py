"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_tab.core import Note


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def standard_tuning() -> tuple[Note, ...]:
    """Standard guitar tuning, string 1 (high E) first."""
    return tuple(Note.parse(name) for name in ["E4", "B3", "G3", "D3", "A2", "E2"])


@pytest.fixture
def bass_tuning() -> tuple[Note, ...]:
    """Four-string bass tuning."""
    return tuple(Note.parse(name) for name in ["G2", "D2", "A1", "E1"])


@pytest.fixture
def three_string_tuning() -> tuple[Note, ...]:
    """Top three guitar strings."""
    return tuple(Note.parse(name) for name in ["E4", "B3", "G3"])
