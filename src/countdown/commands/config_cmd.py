"""Show configuration paths and default settings (CLI command)."""

from __future__ import annotations

import json
import sys
from argparse import Namespace

from countdown.config import configuration_directory, load_config


def run(args: Namespace) -> None:
    """Run the config command: print resolved paths and settings as JSON."""
    if not getattr(args, "show", False):
        print("Error: specify --show.", file=sys.stderr)
        sys.exit(1)

    config_dir = getattr(args, "config_dir", None) or configuration_directory()
    data = {
        "paths": {
            "target_directory": config_dir.target_directory.as_posix(),
            "application_directory": config_dir.application_directory.as_posix(),
            "configuration_file": config_dir.configuration_file.as_posix(),
            "log_file": config_dir.log_file.as_posix(),
            "initialized": config_dir.application_directory.is_dir(),
        },
        "settings": load_config(),
    }
    print("# Config: defaults + environment")
    print(json.dumps(data, indent=2))
