"""CLI entry point: argument parsing, logging setup and subcommand dispatch."""

from __future__ import annotations

import argparse
import logging
import sys

from countdown import APP_NAME, __version__
from countdown.config import ConfigurationDirectory, configuration_directory, load_config
from countdown.errors import CountdownError
from countdown.utils.logs import build_file_handler, build_formatter, level_from_name, TRACE

# Marks handlers installed by setup_logging so a second call can replace them
_HANDLER_TAG = "_countdown_handler"


def setup_logging(config_dir: ConfigurationDirectory, verbose: bool = False) -> logging.Logger:
    """
    Configure the countdown logger: file handler on <application_directory>/countdown.log
    at the configured level (always attached), plus a stderr console handler with --verbose.
    """
    config = load_config()
    log_cfg = config.get("logging") or {}
    root = logging.getLogger(APP_NAME)
    root.setLevel(TRACE)
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root.removeHandler(handler)
            handler.close()

    fh = build_file_handler(config_dir.log_file, level_from_name(log_cfg.get("level")))
    setattr(fh, _HANDLER_TAG, True)
    root.addHandler(fh)
    if verbose:
        console = logging.StreamHandler(sys.stderr)
        console.setLevel(logging.DEBUG)
        console.setFormatter(build_formatter())
        setattr(console, _HANDLER_TAG, True)
        root.addHandler(console)
    return root


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Countdown timer that logs a report of every run.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Also print log records to stderr.")

    # Same flag on subparsers so "countdown run 10 -v" works
    global_flags = argparse.ArgumentParser(add_help=False)
    global_flags.add_argument("-v", "--verbose", action="store_true", help=argparse.SUPPRESS)

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    # init
    p_init = subparsers.add_parser(
        "init",
        help="Create the configuration directory and file if missing.",
        parents=[global_flags],
    )
    p_init.add_argument("--no-log", dest="logger", action="store_false", help="Do not log bootstrap messages.")
    p_init.set_defaults(run="init", logger=True)

    # run
    p_run = subparsers.add_parser("run", help="Run a countdown and log its report.", parents=[global_flags])
    p_run.add_argument("duration", type=float, nargs="?", help="Seconds to count down (default from config).")
    p_run.add_argument("--frequency", "-f", type=float, help="Seconds between ticks.")
    p_run.add_argument("--indicator", "-i", type=str, help="Display indicator: numeric or graphic.")
    p_run.add_argument("--timezone", "-t", type=str, help="Timezone for the report timestamp: utc or local.")
    p_run.add_argument("--no-color", dest="colored", action="store_false", default=None, help="Plain terminal output.")
    p_run.add_argument("--sound", dest="sound", action="store_true", default=None, help="Ring the terminal bell when done.")
    p_run.add_argument("--no-log", dest="logger", action="store_false", default=None, help="Mark the run report as failed and skip bootstrap messages.")
    p_run.set_defaults(run="run")

    # config
    p_config = subparsers.add_parser("config", help="Show configuration paths and defaults.", parents=[global_flags])
    p_config.add_argument("--show", action="store_true", help="Display current settings.")
    p_config.set_defaults(run="config")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    run = getattr(args, "run", None)
    if not run:
        parser.print_help()
        sys.exit(0)

    args.config_dir = configuration_directory()
    setup_logging(args.config_dir, verbose=getattr(args, "verbose", False))

    if run == "init":
        from countdown.commands.init_cmd import run as cmd_run
    elif run == "run":
        from countdown.commands.run_cmd import run as cmd_run
    elif run == "config":
        from countdown.commands.config_cmd import run as cmd_run
    else:
        parser.print_help()
        sys.exit(0)

    try:
        cmd_run(args)
    except (CountdownError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
