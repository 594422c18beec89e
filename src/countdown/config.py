"""Configuration: default paths, constants, value objects and ambient settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir

from countdown import APP_NAME

# Directory name inside the target directory for countdown state
CONFIG_DIR_NAME = APP_NAME
CONFIG_FILENAME = "configuration.toml"
LOG_FILENAME = f"{APP_NAME}.log"

# Written once, when the configuration file is first created
PLACEHOLDER_CONTENT = "Configuration."

# Accepted setting values, in match order: first hit wins
INDICATORS = ("numeric", "graphic")
TIMEZONES = ("utc", "local")

# Environment overrides
ENV_CONFIG_HOME = "COUNTDOWN_CONFIG_HOME"
ENV_LOG_LEVEL = "COUNTDOWN_LOG_LEVEL"


@dataclass(frozen=True)
class ConfigurationDirectory:
    """Where bootstrap state lives, and the directory to return to afterwards."""

    current_directory: Path  # Working directory at startup; restored by the bootstrapper
    target_directory: Path  # Existing directory the config directory is created under
    directory_name: str = CONFIG_DIR_NAME
    file_name: str = CONFIG_FILENAME

    @property
    def application_directory(self) -> Path:
        return self.target_directory / self.directory_name

    @property
    def configuration_file(self) -> Path:
        return self.application_directory / self.file_name

    @property
    def log_file(self) -> Path:
        return self.application_directory / LOG_FILENAME


@dataclass(frozen=True)
class DefaultConfiguration:
    """Fallback labels shown in the run report when a setting is unsupported."""

    indicator: str = "numeric"
    timezone: str = "local"


def default_target_directory() -> Path:
    """
    Base directory the configuration directory is created under.

    $COUNTDOWN_CONFIG_HOME when set, else the platform's per-user config
    directory (e.g. ~/.config on Linux).
    """
    override = os.environ.get(ENV_CONFIG_HOME)
    if override:
        return Path(override).expanduser().resolve()
    return Path(user_config_dir()).resolve()


def configuration_directory(
    target: Path | None = None,
    current: Path | None = None,
) -> ConfigurationDirectory:
    """Build a ConfigurationDirectory with absolute paths. Defaults: platform target, cwd."""
    target_directory = (target if target is not None else default_target_directory()).resolve()
    current_directory = (current if current is not None else Path.cwd()).resolve()
    return ConfigurationDirectory(
        current_directory=current_directory,
        target_directory=target_directory,
    )


def default_config() -> dict[str, Any]:
    """Default settings. Nothing here is read from or written to the configuration file."""
    return {
        "logging": {
            "level": "TRACE",
        },
        "timer": {
            "duration": 60.0,
            "frequency": 1.0,
            "indicator": DefaultConfiguration.indicator,
            "timezone": DefaultConfiguration.timezone,
            "colored": True,
            "sound": False,
            "logger": True,
        },
    }


def load_config() -> dict[str, Any]:
    """Defaults with environment overrides applied ($COUNTDOWN_LOG_LEVEL)."""
    config = default_config()
    level = os.environ.get(ENV_LOG_LEVEL)
    if level:
        config["logging"]["level"] = level.strip().upper()
    return config
