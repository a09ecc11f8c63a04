"""Logging from config and env.

Levels (inclusive):
- ERROR: failed cleanups
- WARNING: rejected or malformed webhooks, and ERROR
- INFO: cleanup outcomes, lock changes, WARNING, and ERROR
- DEBUG: every cleanup stage and all levels above

Per-request HTTP access lines go to the prkeeper.webhook.access logger and
are off unless logging.access_log is set. urllib3 (used by requests for
GitHub calls) logs every connection at DEBUG; it stays at WARNING unless
the service itself runs at DEBUG.

Configure via config.yaml (logging.level, logging.format, logging.access_log)
or env (LOGGING_LEVEL, LOGGING_FORMAT, LOGGING_ACCESS_LOG).
"""

import logging

from prkeeper.config import LoggingConfig

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
ACCESS_LOGGER = "prkeeper.webhook.access"
HTTP_CLIENT_LOGGER = "urllib3"


def _resolve_level(level: str) -> int:
    """Map level name to logging constant; INFO if unknown."""
    return LEVELS.get(level.upper().strip(), logging.INFO)


class PrkeeperLogging:
    """Configures root, access and HTTP client loggers from LoggingConfig."""

    def __init__(self, config: LoggingConfig) -> None:
        self._level = _resolve_level(config.level)
        self._format = config.format or DEFAULT_FORMAT
        self._access_log = config.access_log

    def setup(self) -> None:
        """Apply level and format to the root logger, then tune service loggers."""
        logging.basicConfig(
            level=self._level,
            format=self._format,
            force=True,
        )
        logging.getLogger(ACCESS_LOGGER).setLevel(logging.INFO if self._access_log else logging.WARNING)
        client_level = logging.DEBUG if self._level == logging.DEBUG else logging.WARNING
        logging.getLogger(HTTP_CLIENT_LOGGER).setLevel(client_level)
