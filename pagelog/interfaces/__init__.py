"""Interface definitions for page logging collaborators."""

from .i_text_buffer import ITextBuffer
from .i_document import IDocument
from .i_console import IConsole

__all__ = [
    'ITextBuffer',
    'IDocument',
    'IConsole',
]
