"""Test configuration and shared fixtures."""

import pytest
import tempfile
from pathlib import Path

import pandas as pd

from scoping import Session


@pytest.fixture
def temp_data_dir():
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def memory_session():
    """An activated session backed by plain dicts."""
    session = Session({}, {}, session_id="test-session")
    with session.activate():
        yield session


@pytest.fixture
def sample_frame():
    """Small frame with two numeric columns and one label column."""
    return pd.DataFrame({
        "height": [150.0, 160.0, 170.0, 180.0, None],
        "weight": [50, 60, 70, 80, 90],
        "label": ["a", "b", "c", "d", "e"],
    })
