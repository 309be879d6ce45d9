"""In-memory page document adapter."""

import html
from dataclasses import dataclass
from typing import Optional
from ..interfaces import IDocument


@dataclass
class TextareaElement:
    """Textarea element data."""
    id: str
    rows: int = 20
    cols: int = 80
    attributes: str = ""
    value: str = ""

    def to_html(self) -> str:
        """Render element markup."""
        attrs = f" {self.attributes}" if self.attributes else ""
        return (
            f'<textarea id="{html.escape(self.id)}" rows="{self.rows}" '
            f'cols="{self.cols}"{attrs}>{html.escape(self.value)}</textarea>'
        )


class InMemoryDocument:
    """Adapter holding page elements in process memory."""

    def __init__(self):
        self.elements: list[TextareaElement] = []

    def get_element_by_id(self, element_id: str) -> Optional[TextareaElement]:
        """Find element by id (latest appended wins)."""
        for element in reversed(self.elements):
            if element.id == element_id:
                return element
        return None

    def append_textarea(
        self, element_id: str, rows: int, cols: int, attributes: str
    ) -> TextareaElement:
        """Append textarea to page root."""
        element = TextareaElement(
            id=element_id,
            rows=rows,
            cols=cols,
            attributes=attributes
        )
        self.elements.append(element)
        return element

    def render(self) -> str:
        """Render page markup."""
        body = "".join(element.to_html() for element in self.elements)
        return f"<html>{body}</html>"
