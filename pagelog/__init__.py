"""Configurable logging to an on-page textarea and the console."""

from .log import LINE_DOUBLE, LINE_SINGLE, Log, LogType

__all__ = [
    'Log',
    'LogType',
    'LINE_SINGLE',
    'LINE_DOUBLE',
]
