"""Shared utilities: substring matching and log record formatting."""

from countdown.utils.logs import (
    DATE_FORMAT,
    LOG_FORMAT,
    TRACE,
    build_file_handler,
    build_formatter,
    trace,
)
from countdown.utils.patterns import first_match, is_in

__all__ = [
    "DATE_FORMAT",
    "LOG_FORMAT",
    "TRACE",
    "build_file_handler",
    "build_formatter",
    "first_match",
    "is_in",
    "trace",
]
