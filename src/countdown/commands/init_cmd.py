"""Create the configuration directory and file. Safe to run repeatedly."""

from __future__ import annotations

from argparse import Namespace

from countdown.bootstrap import BootstrapStatus, ensure_configuration_exists
from countdown.config import configuration_directory


def run(args: Namespace) -> None:
    """Run the init command: bootstrap, then say what happened."""
    config_dir = getattr(args, "config_dir", None) or configuration_directory()
    status = ensure_configuration_exists(config_dir, getattr(args, "logger", True))

    if status is BootstrapStatus.CREATED:
        print(f"Initialized countdown configuration at {config_dir.application_directory.as_posix()}/")
    elif status is BootstrapStatus.ALREADY_EXISTS:
        print(f"Configuration already exists at {config_dir.application_directory.as_posix()}/")
    else:
        print(f"Could not create {config_dir.application_directory.as_posix()}/; continuing without it.")
    print(f"  {config_dir.configuration_file.as_posix()}")
