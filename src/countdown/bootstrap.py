"""First-run creation of the configuration directory and file. Safe to call on every run."""

from __future__ import annotations

import enum
import logging
import os

from countdown.config import PLACEHOLDER_CONTENT, ConfigurationDirectory
from countdown.errors import BootstrapError
from countdown.utils.logs import trace

logger = logging.getLogger(__name__)


class BootstrapStatus(enum.Enum):
    CREATED = "created"
    ALREADY_EXISTS = "already exists"
    FAILED = "failed"


def _create_configuration_file(config: ConfigurationDirectory) -> bool:
    """
    Open the configuration file for read+write, creating it if absent, never truncating.
    Writes the placeholder only into an empty (just created) file. False on any OSError.
    """
    try:
        fd = os.open(config.configuration_file, os.O_RDWR | os.O_CREAT, 0o644)
    except OSError:
        return False
    try:
        with os.fdopen(fd, "r+", encoding="utf-8") as f:
            if not f.read(1):
                f.write(PLACEHOLDER_CONTENT)
    except OSError:
        return False
    return True


def _restore_working_directory(config: ConfigurationDirectory) -> None:
    try:
        os.chdir(config.current_directory)
    except OSError as e:
        raise BootstrapError(
            f"Cannot return to working directory {config.current_directory}: {e}"
        ) from e


def ensure_configuration_exists(
    config: ConfigurationDirectory,
    logging_enabled: bool,
    log: logging.Logger | None = None,
) -> BootstrapStatus:
    """
    Make sure <target>/<directory_name>/ and its configuration file exist.

    - Directory present: nothing is created; a TRACE record notes it.
    - Directory absent: it is created, then the file; INFO records announce both and
      confirm each one that actually succeeded. A file that cannot be created only
      drops its confirmation line.
    - Directory cannot be created for any other reason: FAILED, nothing is logged.

    Records are only emitted when logging_enabled. All file access uses absolute
    paths; on every exit path the process working directory is set back to
    config.current_directory.

    Raises BootstrapError if target_directory does not exist or the working
    directory cannot be restored.
    """
    log = log or logger
    try:
        if not config.target_directory.is_dir():
            raise BootstrapError(
                f"Target directory does not exist: {config.target_directory.as_posix()}"
            )

        try:
            config.application_directory.mkdir()
        except FileExistsError:
            if logging_enabled:
                trace(log, "Application's configuration directory already exists. Moving on.")
            return BootstrapStatus.ALREADY_EXISTS
        except OSError:
            return BootstrapStatus.FAILED

        if logging_enabled:
            log.info("Creating application's configuration directory.")
            log.info("Creating application's configuration file.")

        file_created = _create_configuration_file(config)

        if logging_enabled and config.application_directory.is_dir():
            log.info("Successfully created application's configuration directory.")
        if logging_enabled and file_created:
            log.info("Successfully created application's configuration file.")
        return BootstrapStatus.CREATED
    finally:
        _restore_working_directory(config)
