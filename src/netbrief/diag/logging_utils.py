"""Logging helpers for netbrief."""

from __future__ import annotations

import logging


class LoggingManager:
    """Manage netbrief logging configuration and messages."""

    def __init__(self, logger_name: str = "netbrief") -> None:
        self.logger = logging.getLogger(logger_name)
        self.logger.propagate = False

    def setup(self, debug: bool) -> None:
        """Configure logging to stderr; nothing is written to disk."""
        level = logging.DEBUG if debug else logging.WARNING

        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter("netbrief: [%(levelname)s] %(message)s"))

        self.logger.handlers.clear()
        self.logger.addHandler(console)
        self.logger.setLevel(level)

    def warning(self, msg: str, *args: object) -> None:
        self.logger.warning(msg, *args)

    def debug(self, msg: str, *args: object) -> None:
        """Log a debug message."""
        self.logger.debug(msg, *args)


DEFAULT_LOGGER = LoggingManager()
