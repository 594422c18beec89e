"""Log record shape and handlers for the countdown log file."""

from __future__ import annotations

import logging
from pathlib import Path

# Below DEBUG; used for "nothing to do" bootstrap messages
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

# [2024-01-31][13:05:09][INFO][countdown.report] - message
LOG_FORMAT = "[%(asctime)s][%(levelname)s][%(name)s] - %(message)s"
DATE_FORMAT = "%Y-%m-%d][%H:%M:%S"


def trace(logger: logging.Logger, msg: str, *args: object) -> None:
    """Log msg at TRACE level on logger."""
    if logger.isEnabledFor(TRACE):
        logger.log(TRACE, msg, *args)


def build_formatter() -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


def level_from_name(name: str | None, default: int = TRACE) -> int:
    """Map a level name ('TRACE', 'info', ...) to its number; unknown names give default."""
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


class LazyFileHandler(logging.FileHandler):
    """FileHandler that drops records while its file cannot be opened instead of raising."""

    def emit(self, record: logging.LogRecord) -> None:
        if self.stream is None:
            try:
                self.stream = self._open()
            except OSError:
                # Directory missing or not writable; retried on the next record
                return
        super().emit(record)


def build_file_handler(path: Path | str, level: int = TRACE) -> logging.FileHandler:
    """
    Append-mode handler for the log file at path.

    The file is opened on the first record (delay=True), so the handler can be
    attached before the configuration directory exists. Records that arrive while
    the file cannot be opened are dropped; logging never raises into the run.
    """
    handler = LazyFileHandler(Path(path), mode="a", encoding="utf-8", delay=True)
    handler.setLevel(level)
    handler.setFormatter(build_formatter())
    return handler
