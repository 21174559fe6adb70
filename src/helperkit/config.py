"""Configuration utilities for helperkit.

Configuration is read from the environment on demand, never at import time.
It only affects logging; the helper functions themselves have fixed behaviour.
"""

import logging
import os

from helperkit.errors import InvalidLogLevelError

LOG_LEVEL_ENV = "HELPERKIT_LOG_LEVEL"  # pragma: no mutate
DEBUG_ENV = "HELPERKIT_DEBUG"  # pragma: no mutate

DEFAULT_LOG_LEVEL = logging.WARNING
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def parse_log_level(value: str) -> int:
    """Convert a textual level name (e.g. ``"debug"``) to its numeric level.

    Raises:
        InvalidLogLevelError: If ``value`` is not a standard level name.
    """
    level = logging.getLevelNamesMapping().get(value.strip().upper())
    if level is None:
        raise InvalidLogLevelError(value)
    return level


def get_log_level() -> int:
    """Get the log level from the environment.

    Returns:
        The numeric level named by `HELPERKIT_LOG_LEVEL`, or `WARNING`
        when the variable is unset or empty.

    Raises:
        InvalidLogLevelError: If the variable holds an unknown level name.
    """
    if not (value := os.environ.get(LOG_LEVEL_ENV)):
        return DEFAULT_LOG_LEVEL
    return parse_log_level(value)


def is_debug_mode() -> bool:
    """Return True when `HELPERKIT_DEBUG` holds a truthy value."""
    return os.environ.get(DEBUG_ENV, "").strip().lower() in _TRUTHY
