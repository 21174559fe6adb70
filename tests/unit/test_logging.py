"""Unit tests for helperkit.logging."""

import logging

from rich.logging import RichHandler

from helperkit.config import DEBUG_ENV, LOG_LEVEL_ENV
from helperkit.logging import config_console_handler, configure_logging

# pylint: disable=unused-argument


def make_record(name: str) -> logging.LogRecord:
    """Build a bare log record for logger ``name``."""
    return logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)


class TestConsoleHandler:
    """Tests for config_console_handler."""

    @staticmethod
    def test_default_handler():
        """The default handler keeps the level and prefixes the logger name."""
        handler = config_console_handler(level=logging.WARNING)
        assert isinstance(handler, RichHandler)
        assert handler.level == logging.WARNING
        assert handler.format(make_record("helperkit.sequence")) == (
            "helperkit.sequence: msg"
        )

    @staticmethod
    def test_debug_mode_overrides_level():
        """Debug mode forces DEBUG and adds timestamps."""
        handler = config_console_handler(level=logging.ERROR, debug_mode=True)
        assert handler.level == logging.DEBUG
        assert handler.format(make_record("helperkit.sequence")).endswith(
            " helperkit.sequence: msg"
        )

    @staticmethod
    def test_no_color():
        """Disabling color leaves the console without a color system."""
        handler = config_console_handler(color=False)
        assert handler.console.color_system is None


class TestConfigureLogging:
    """Tests for configure_logging."""

    @staticmethod
    def test_uses_environment_level(clean_env, helperkit_logger):
        """Without an explicit level the environment decides."""
        clean_env.setenv(LOG_LEVEL_ENV, "INFO")
        handler = configure_logging()
        assert handler in helperkit_logger.handlers
        assert handler.level == logging.INFO
        assert helperkit_logger.level == logging.INFO

    @staticmethod
    def test_explicit_level_wins(clean_env, helperkit_logger):
        """An explicit level ignores the environment."""
        clean_env.setenv(LOG_LEVEL_ENV, "INFO")
        handler = configure_logging(level=logging.ERROR)
        assert handler.level == logging.ERROR

    @staticmethod
    def test_debug_env(clean_env, helperkit_logger):
        """HELPERKIT_DEBUG switches to the debug console format."""
        clean_env.setenv(DEBUG_ENV, "1")
        handler = configure_logging(level=logging.WARNING)
        assert handler.level == logging.DEBUG

    @staticmethod
    def test_repeated_calls_replace_handler(clean_env, helperkit_logger):
        """Only one console handler is attached at a time."""
        first = configure_logging()
        second = configure_logging()
        rich_handlers = [
            h for h in helperkit_logger.handlers if isinstance(h, RichHandler)
        ]
        assert rich_handlers == [second]
        assert first not in helperkit_logger.handlers

    @staticmethod
    def test_only_package_records_reach_handler(
        clean_env, helperkit_logger, monkeypatch
    ):
        """Records from other libraries bypass the package console handler."""
        handler = configure_logging(level=logging.INFO)
        emitted: list[logging.LogRecord] = []
        monkeypatch.setattr(handler, "emit", emitted.append)

        logging.getLogger("urllib3.connectionpool").warning("third-party")
        logging.getLogger("helperkit.sequence").warning("own")

        assert [record.getMessage() for record in emitted] == ["own"]
        assert handler.format(emitted[0]) == "helperkit.sequence: own"
