"""Shared fixtures: isolate logging handlers and config location per test."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from countdown import APP_NAME
from countdown.config import ENV_CONFIG_HOME, ENV_LOG_LEVEL, ConfigurationDirectory


@pytest.fixture(autouse=True)
def _reset_countdown_logger():
    """Drop handlers setup_logging installed so files from other tests are not reused."""
    yield
    root = logging.getLogger(APP_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.NOTSET)


@pytest.fixture
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Target directory for the config dir, via $COUNTDOWN_CONFIG_HOME."""
    home = tmp_path / "config-home"
    home.mkdir()
    monkeypatch.setenv(ENV_CONFIG_HOME, str(home))
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    return home


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Working directory the process starts in."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def config_dir(config_home: Path, workdir: Path) -> ConfigurationDirectory:
    return ConfigurationDirectory(
        current_directory=workdir.resolve(),
        target_directory=config_home.resolve(),
    )
