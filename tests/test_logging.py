"""Tests for prkeeper.logging (root, access and HTTP client loggers)."""

import logging

from prkeeper.config import LoggingConfig
from prkeeper.logging import (
    ACCESS_LOGGER,
    DEFAULT_FORMAT,
    HTTP_CLIENT_LOGGER,
    PrkeeperLogging,
    _resolve_level,
)


class TestResolveLevel:
    """_resolve_level maps level names to logging constants."""

    def test_lowercase_and_whitespace(self) -> None:
        """Level is stripped and uppercased before lookup."""
        assert _resolve_level(" debug ") == logging.DEBUG
        assert _resolve_level("error") == logging.ERROR

    def test_unknown_level_returns_info(self) -> None:
        assert _resolve_level("TRACE") == logging.INFO


class TestPrkeeperLogging:
    """PrkeeperLogging applies LoggingConfig."""

    def test_setup_sets_root_level_and_format(self) -> None:
        custom = "%(levelname)s || %(message)s"
        PrkeeperLogging(LoggingConfig(level="WARNING", format=custom)).setup()
        assert logging.root.level == logging.WARNING
        assert logging.root.handlers[0].formatter._fmt == custom

    def test_empty_format_uses_default(self) -> None:
        PrkeeperLogging(LoggingConfig(level="INFO", format="")).setup()
        assert logging.root.handlers[0].formatter._fmt == DEFAULT_FORMAT

    def test_access_log_off_by_default(self) -> None:
        """Webhook access lines are suppressed unless enabled."""
        PrkeeperLogging(LoggingConfig(level="INFO")).setup()
        assert not logging.getLogger(ACCESS_LOGGER).isEnabledFor(logging.INFO)

    def test_access_log_enabled(self) -> None:
        """access_log=True lets access lines through even with a WARNING root."""
        PrkeeperLogging(LoggingConfig(level="WARNING", access_log=True)).setup()
        assert logging.getLogger(ACCESS_LOGGER).isEnabledFor(logging.INFO)

    def test_http_client_quiet_unless_debug(self) -> None:
        """urllib3 connection chatter only shows at DEBUG."""
        PrkeeperLogging(LoggingConfig(level="INFO")).setup()
        assert logging.getLogger(HTTP_CLIENT_LOGGER).level == logging.WARNING
        PrkeeperLogging(LoggingConfig(level="DEBUG")).setup()
        assert logging.getLogger(HTTP_CLIENT_LOGGER).level == logging.DEBUG
