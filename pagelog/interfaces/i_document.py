"""Page document interface (adapter pattern)."""

from typing import Optional, Protocol

from .i_text_buffer import ITextBuffer


class IDocument(Protocol):
    """Interface for page lookup and mutation."""

    def get_element_by_id(self, element_id: str) -> Optional[ITextBuffer]:
        """Find element by id, None when absent."""
        ...

    def append_textarea(
        self, element_id: str, rows: int, cols: int, attributes: str
    ) -> ITextBuffer:
        """Append a textarea to the page root."""
        ...
