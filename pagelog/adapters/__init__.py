"""Adapter implementations for page logging."""

from .stdout_adapter import StdoutConsoleAdapter
from .logging_adapter import LoggingConsoleAdapter
from .memory_document import InMemoryDocument, TextareaElement

__all__ = [
    'StdoutConsoleAdapter',
    'LoggingConsoleAdapter',
    'InMemoryDocument',
    'TextareaElement',
]
