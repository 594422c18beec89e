"""Countdown loop and the settings it runs with."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import Callable

from countdown.config import INDICATORS
from countdown.utils.patterns import first_match

BAR_WIDTH = 30


@dataclass
class TimerSettings:
    """
    Settings for one countdown run.

    indicator and timezone hold whatever the user typed until the run report
    normalizes them in place.
    """

    duration: float  # Seconds to count down from
    frequency: float = 1.0  # Seconds between ticks
    indicator: str = "numeric"
    timezone: str = "local"
    colored: bool = True
    sound: bool = False
    logger: bool = True  # Log bootstrap messages and allow a successful report

    def ticks(self) -> int:
        """Number of ticks needed to cover duration (a partial last tick counts)."""
        return math.ceil(self.duration / self.frequency)

    def total_duration(self) -> float:
        """Seconds actually waited: ticks times frequency."""
        return self.ticks() * self.frequency

    def validate(self) -> None:
        if not (math.isfinite(self.duration) and math.isfinite(self.frequency)):
            raise ValueError(
                f"Duration and frequency must be finite, got {self.duration} and {self.frequency}"
            )
        if self.duration < 0:
            raise ValueError(f"Duration must not be negative, got {self.duration}")
        if self.frequency <= 0:
            raise ValueError(f"Frequency must be positive, got {self.frequency}")


def _format_seconds(seconds: float) -> str:
    whole = max(0, int(math.ceil(seconds)))
    minutes, secs = divmod(whole, 60)
    hours, minutes = divmod(minutes, 60)
    if hours:
        return f"{hours:d}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"


def render(settings: TimerSettings, remaining: float) -> str:
    """One display line for the tick with `remaining` seconds left."""
    if first_match(settings.indicator, INDICATORS) == "graphic" and settings.duration > 0:
        done = 1.0 - max(remaining, 0.0) / settings.duration
        filled = int(round(done * BAR_WIDTH))
        return f"[{'#' * filled}{'.' * (BAR_WIDTH - filled)}] {_format_seconds(remaining)}"
    return _format_seconds(remaining)


def run(
    settings: TimerSettings,
    sleep: Callable[[float], None] = time.sleep,
    echo: Callable[[str], None] = print,
) -> int:
    """
    Count down from settings.duration to zero, one line per tick.

    Sleeps settings.frequency between ticks (the last one only as long as needed)
    and rings the terminal bell at the end when settings.sound is set.
    Returns the number of ticks. Raises ValueError for invalid settings.
    """
    settings.validate()
    remaining = float(settings.duration)
    ticks = settings.ticks()
    echo(render(settings, remaining))
    for tick in range(1, ticks + 1):
        sleep(min(settings.frequency, remaining))
        remaining = max(settings.duration - tick * settings.frequency, 0.0)
        echo(render(settings, remaining))
    if settings.sound:
        echo("\a")
    return ticks
