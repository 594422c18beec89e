"""countdown: command-line countdown timer with first-run bootstrap and run reports."""

__version__ = "0.1.0"

APP_NAME = "countdown"
