"""Run report: normalize timer settings, timestamp the run and log one summary record."""

from __future__ import annotations

import enum
import logging
from datetime import datetime, timezone, tzinfo
from typing import Callable

from countdown import __version__
from countdown.color import Color, apply_color
from countdown.config import INDICATORS, TIMEZONES, ConfigurationDirectory, DefaultConfiguration
from countdown.timer import TimerSettings
from countdown.utils.patterns import first_match

logger = logging.getLogger(__name__)

UNSUPPORTED_TIMEZONE_WARNING = "\nUnsupported timezone. Running through default timezone instead.\n"


class Indicator(str, enum.Enum):
    NUMERIC = "numeric"
    GRAPHIC = "graphic"
    UNSUPPORTED = "unsupported indicator"


class Timezone(str, enum.Enum):
    UTC = "utc"
    LOCAL = "local"
    UNSUPPORTED = "unsupported timezone"



def normalize_indicator(raw: str) -> Indicator:
    """Map free-form input onto an Indicator, case-insensitively by substring."""
    match = first_match(raw, INDICATORS)
    return Indicator(match) if match else Indicator.UNSUPPORTED


def normalize_timezone(raw: str) -> Timezone:
    """Map free-form input onto a Timezone, case-insensitively by substring."""
    match = first_match(raw, TIMEZONES)
    return Timezone(match) if match else Timezone.UNSUPPORTED


def _now(tz: tzinfo | None) -> datetime:
    """Aware current time: in tz, or in the local timezone when tz is None."""
    if tz is None:
        return datetime.now().astimezone()
    return datetime.now(tz)


def _seconds(value: float) -> str:
    """Full-precision seconds; whole numbers without a trailing .0."""
    if float(value).is_integer():
        return str(int(value))
    return str(float(value))


def format_report(
    succeeded: bool,
    settings: TimerSettings,
    indicator_label: str,
    timezone_label: str,
) -> str:
    """Multi-line report body; one field per line."""
    headline = "Executed successfully." if succeeded else "Execution failed."
    lines = [
        headline,
        f"[DURATION]  = {_seconds(settings.duration)} SECONDS",
        f"[FREQUENCY] = {_seconds(settings.frequency)} SECONDS",
        f"[TOTAL]     = {_seconds(settings.total_duration())} SECONDS",
        f"[INDICATOR] = {indicator_label}",
        f"[COLORED]   = {str(settings.colored).lower()}",
        f"[SOUND]     = {str(settings.sound).lower()}",
        f"[TIMEZONE]  = {timezone_label}",
        f"[VERSION]   = {__version__}",
    ]
    return "\n".join(lines)


def report_execution(
    config: ConfigurationDirectory,
    defaults: DefaultConfiguration,
    settings: TimerSettings,
    log: logging.Logger | None = None,
    echo: Callable[[bool, str, Color], None] = apply_color,
    clock: Callable[[tzinfo | None], datetime] = _now,
) -> str:
    """
    Normalize settings.indicator/timezone in place, then log one report for the run.

    The record is INFO when settings.logger is set and the indicator is supported,
    ERROR otherwise. An unsupported timezone falls back to local time, prints a
    warning through echo and annotates both setting fields with the defaults.
    Returns the timestamp used, as a string. Never raises for unrecognized settings.

    config is not read: the working directory is left alone and the log file
    location is held by the handler setup_logging attached for config.log_file.
    It stays in the signature so both run steps take the same configuration.
    """
    log = log or logger
    indicator = normalize_indicator(settings.indicator)
    tz_kind = normalize_timezone(settings.timezone)
    settings.indicator = indicator.value
    settings.timezone = tz_kind.value

    indicator_label = indicator.value.upper()
    timezone_label = tz_kind.value.upper()
    if tz_kind is Timezone.UTC:
        executed_at = clock(timezone.utc)
    elif tz_kind is Timezone.LOCAL:
        executed_at = clock(None)
    else:
        executed_at = clock(None)
        echo(settings.colored, UNSUPPORTED_TIMEZONE_WARNING, Color.RED)
        indicator_label = f"{indicator_label} - [{defaults.indicator}]"
        timezone_label = f"{timezone_label} - [{defaults.timezone}]"

    succeeded = settings.logger and indicator is not Indicator.UNSUPPORTED
    message = format_report(succeeded, settings, indicator_label, timezone_label)
    if succeeded:
        log.info(message)
    else:
        log.error(message)
    return str(executed_at)
