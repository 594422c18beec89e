"""
Custom exception types used across countdown.

Only conditions the CLI treats as fatal get an exception; everything the
bootstrap and report steps can degrade around is absorbed where it happens.
"""

from __future__ import annotations


class CountdownError(Exception):
    """Base class for all countdown specific errors."""


class BootstrapError(CountdownError):
    """Raised when the configuration directory cannot be set up at all."""
