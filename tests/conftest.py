"""Pytest configuration and fixtures."""

import pytest
import tempfile
from pathlib import Path

from click.testing import CliRunner

from lift_cli.models import Movement


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def runner():
    """Click test runner."""
    return CliRunner()


@pytest.fixture
def squat():
    return Movement(name="squat", is_upper=False, require_weight=True)


@pytest.fixture
def sample_movements():
    """A few movements with distinct names."""
    return [
        Movement(name="squat", is_upper=False, require_weight=True),
        Movement(name="pull up", is_upper=True, require_weight=False),
        Movement(name="bench press", is_upper=True, require_weight=True),
    ]


@pytest.fixture
def blocked_db_path(tmp_path):
    """A database path whose parent is a regular file, so it can never be created."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    return blocker / "lift.db"
