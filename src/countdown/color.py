"""Terminal color output (ANSI escapes)."""

from __future__ import annotations

import enum
import sys
from typing import TextIO

RESET = "\033[0m"


class Color(enum.Enum):
    RED = "31"
    GREEN = "32"
    YELLOW = "33"
    BLUE = "34"
    CYAN = "36"


def colorize(text: str, color: Color) -> str:
    """Wrap text in the escape sequence for color."""
    return f"\033[{color.value}m{text}{RESET}"


def apply_color(enabled: bool, text: str, color: Color, stream: TextIO | None = None) -> None:
    """Print text to stream (stdout by default), colored if enabled, plain otherwise."""
    out = stream if stream is not None else sys.stdout
    print(colorize(text, color) if enabled else text, file=out)
