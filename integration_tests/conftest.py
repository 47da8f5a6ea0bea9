"""Pytest configuration for integration tests."""

import pytest


# Mark all tests in this directory as integration tests
def pytest_collection_modifyitems(items):
    """Add integration marker to all tests in this directory."""
    for item in items:
        if "integration_tests" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run inside an empty directory with no LIFT_DB override."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LIFT_DB", raising=False)
    return tmp_path
