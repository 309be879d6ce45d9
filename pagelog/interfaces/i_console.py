"""Console interface (adapter pattern)."""

from typing import Protocol


class IConsole(Protocol):
    """Interface for console output channels."""

    def log(self, message: str) -> None:
        """Write plain message."""
        ...

    def info(self, message: str) -> None:
        """Write info message."""
        ...

    def debug(self, message: str) -> None:
        """Write debug message."""
        ...

    def warn(self, message: str) -> None:
        """Write warning message."""
        ...

    def error(self, message: str) -> None:
        """Write error message."""
        ...

    def clear(self) -> None:
        """Clear console output."""
        ...
