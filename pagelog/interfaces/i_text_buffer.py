"""Text buffer interface (adapter pattern)."""

from typing import Protocol


class ITextBuffer(Protocol):
    """Interface for a mutable on-page text region."""

    value: str
