"""Stdout console adapter."""

import sys
from ..interfaces import IConsole

# ANSI: erase screen, cursor home
CLEAR_SCREEN = '\033[2J\033[H'


class StdoutConsoleAdapter:
    """Adapter for console output on stdout/stderr."""

    def log(self, message: str) -> None:
        """Write plain message to stdout."""
        print(message, flush=True)

    def info(self, message: str) -> None:
        """Write info message to stdout."""
        print(message, flush=True)

    def debug(self, message: str) -> None:
        """Write debug message to stdout."""
        print(message, flush=True)

    def warn(self, message: str) -> None:
        """Write warning message to stderr."""
        print(message, file=sys.stderr, flush=True)

    def error(self, message: str) -> None:
        """Write error message to stderr."""
        print(message, file=sys.stderr, flush=True)

    def clear(self) -> None:
        """Clear terminal screen."""
        print(CLEAR_SCREEN, end='', flush=True)
