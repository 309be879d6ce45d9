"""Console adapter on top of stdlib logging."""

import logging
from typing import Optional
from ..interfaces import IConsole


class LoggingConsoleAdapter:
    """Adapter routing console channels to a logging.Logger."""

    def __init__(self, name: str = "pagelog", logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(name)

    def log(self, message: str) -> None:
        """Write plain message (INFO)."""
        self.logger.info(message)

    def info(self, message: str) -> None:
        """Write info message."""
        self.logger.info(message)

    def debug(self, message: str) -> None:
        """Write debug message."""
        self.logger.debug(message)

    def warn(self, message: str) -> None:
        """Write warning message."""
        self.logger.warning(message)

    def error(self, message: str) -> None:
        """Write error message."""
        self.logger.error(message)

    def clear(self) -> None:
        """Nothing to erase: handlers own their output."""
