"""Console logging for applications that want to see helperkit diagnostics.

The package itself only installs a ``NullHandler``. `configure_logging`
attaches a Rich console handler to the ``helperkit`` logger, so it shows the
package's own records and leaves the root logger (and every other library's
records) to the application.
"""

from __future__ import annotations

import logging
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from helperkit.config import get_log_level, is_debug_mode

PROJECT_LOGGER = "helperkit"

CONSOLE_FORMAT = "%(name)s: %(message)s"
DEBUG_FORMAT = "%(asctime)s %(name)s: %(message)s"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build a RichHandler writing ``helperkit`` records to stderr.

    Args:
        level: Minimum level for console output (DEBUG when ``debug_mode`` is set).
        debug_mode: Add timestamps and the source location of each record.
        color: Emit color codes when True.

    Returns:
        RichHandler: Handler formatted as ``<logger name>: <message>``.
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    handler.setFormatter(
        logging.Formatter(fmt=DEBUG_FORMAT if debug_mode else CONSOLE_FORMAT)
    )
    return handler


def configure_logging(level: int | None = None, color: bool = True) -> RichHandler:
    """Attach a console handler to the ``helperkit`` logger.

    Falls back to `HELPERKIT_LOG_LEVEL` / `HELPERKIT_DEBUG` when ``level`` is
    not given. Calling it again replaces the previously attached console
    handler instead of stacking a second one.

    Returns:
        RichHandler: The handler now attached to the ``helperkit`` logger.
    """
    debug_mode = is_debug_mode()
    if level is None:
        level = get_log_level()

    logger = logging.getLogger(PROJECT_LOGGER)
    for existing in list(logger.handlers):
        if isinstance(existing, RichHandler):
            logger.removeHandler(existing)

    handler = config_console_handler(level=level, debug_mode=debug_mode, color=color)
    logger.addHandler(handler)
    logger.setLevel(handler.level)
    return handler
