"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from taskpal.config import Config  # noqa: E402


@pytest.fixture
def storage_path(tmp_path):
    """Path to a storage file that does not exist yet."""
    return tmp_path / "tasks.txt"


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep configuration and data under a temporary home directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("TASKPAL_CONFIG", raising=False)
    Config._instance = None
    yield home
    Config._instance = None
