"""Run a countdown: bootstrap, count down, then log the run report."""

from __future__ import annotations

import logging
from argparse import Namespace
from typing import Any

from countdown.bootstrap import ensure_configuration_exists
from countdown.color import Color, apply_color
from countdown.config import DefaultConfiguration, configuration_directory, load_config
from countdown.report import report_execution
from countdown.timer import TimerSettings, run as run_timer

logger = logging.getLogger(__name__)


def settings_from_args(args: Namespace, defaults: dict[str, Any]) -> TimerSettings:
    """TimerSettings from CLI args; options left unset fall back to defaults['timer']."""
    timer_cfg = defaults.get("timer") or {}

    def pick(name: str) -> Any:
        value = getattr(args, name, None)
        return timer_cfg.get(name) if value is None else value

    return TimerSettings(
        duration=float(pick("duration")),
        frequency=float(pick("frequency")),
        indicator=str(pick("indicator")),
        timezone=str(pick("timezone")),
        colored=bool(pick("colored")),
        sound=bool(pick("sound")),
        logger=bool(pick("logger")),
    )


def run(args: Namespace) -> None:
    """Run the countdown command."""
    config_dir = getattr(args, "config_dir", None) or configuration_directory()
    settings = settings_from_args(args, load_config())
    settings.validate()

    ensure_configuration_exists(config_dir, settings.logger)

    ticks = run_timer(settings)
    logger.debug("Countdown finished after %d ticks", ticks)

    finished_at = report_execution(config_dir, DefaultConfiguration(), settings)
    apply_color(settings.colored, f"Finished at {finished_at}", Color.GREEN)
