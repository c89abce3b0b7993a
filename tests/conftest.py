"""Pytest fixtures for appcli tests."""

from datetime import datetime
from pathlib import Path

import pytest

from appcli.log import disable_verbose

# Fixed snapshot returned by the fixed_clock fixture
FIXED_NOW = datetime(2024, 2, 29, 23, 59, 58)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch):
    """Run every test in an empty project with no user config or app env vars."""
    project = tmp_path / "project"
    project.mkdir()
    (project / ".git").mkdir()
    monkeypatch.chdir(project)

    monkeypatch.setattr("appcli.config.USER_CONFIG_PATH", tmp_path / "user" / "config.toml")
    monkeypatch.delenv("APP_DATA_DIR", raising=False)
    monkeypatch.delenv("APP_ENV", raising=False)

    yield project

    disable_verbose()


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Create an empty, writable report directory."""
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def fixed_clock():
    """Clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW
