"""Configurable logging to an on-page textarea and the console."""

from enum import Enum
from typing import Optional, Union

from .adapters import InMemoryDocument, StdoutConsoleAdapter
from .interfaces import IConsole, IDocument, ITextBuffer


class LogType(str, Enum):
    """Message severity."""
    Log = 'Log'
    Info = 'Info'
    Debug = 'Debug'
    Warn = 'Warn'
    Error = 'Error'


LINE_SINGLE = '-' * 60
LINE_DOUBLE = '=' * 60

TEXTAREA_NOT_FOUND = 'Textarea not found or not specified.'

# Table-driven dispatch: severity -> textarea prefix / console channel
_PREFIXES = {
    LogType.Log: '[Log] ',
    LogType.Info: '[Info] ',
    LogType.Debug: '[Debug] ',
    LogType.Warn: '[Warn] ',
    LogType.Error: '[Error] ',
}

_CHANNELS = {
    LogType.Log: 'log',
    LogType.Info: 'info',
    LogType.Debug: 'debug',
    LogType.Warn: 'warn',
    LogType.Error: 'error',
}

LogTypeArg = Optional[Union[LogType, str]]


def _lookup(table: dict, log_type: LogTypeArg, default: str) -> str:
    """Resolve severity in table, default arm for anything unknown."""
    try:
        return table.get(log_type, default)
    except TypeError:
        # unhashable severity
        return default


class Log:
    """Routes messages to a textarea, the console, both or neither.

    Args:
        textarea_id: id of the textarea element; "" means none configured.
        console_logging_enabled: write to the console sink.
        textarea_logging_enabled: write to the textarea sink.
        console: console collaborator (stdout by default).
        document: page collaborator (fresh in-memory page by default).
    """

    LogTypes = LogType
    LineSingle = LINE_SINGLE
    LineDouble = LINE_DOUBLE

    def __init__(
        self,
        textarea_id: str = '',
        console_logging_enabled: bool = True,
        textarea_logging_enabled: bool = True,
        *,
        console: Optional[IConsole] = None,
        document: Optional[IDocument] = None
    ):
        self._textarea_id = textarea_id
        self._console_logging_enabled = console_logging_enabled
        self._textarea_logging_enabled = textarea_logging_enabled
        self.console = console if console is not None else StdoutConsoleAdapter()
        self.document = document if document is not None else InMemoryDocument()

    def __repr__(self) -> str:
        return (
            f"Log(textarea_id={self._textarea_id!r}, "
            f"console_logging_enabled={self._console_logging_enabled!r}, "
            f"textarea_logging_enabled={self._textarea_logging_enabled!r})"
        )

    @property
    def console_logging_enabled(self) -> bool:
        """Enabled status of console logging."""
        return self._console_logging_enabled

    @console_logging_enabled.setter
    def console_logging_enabled(self, value: bool) -> None:
        self._console_logging_enabled = value

    @property
    def textarea_logging_enabled(self) -> bool:
        """Enabled status of textarea logging."""
        return self._textarea_logging_enabled

    @textarea_logging_enabled.setter
    def textarea_logging_enabled(self, value: bool) -> None:
        self._textarea_logging_enabled = value

    @property
    def textarea_id(self) -> str:
        """Id of the textarea element used for logging."""
        return self._textarea_id

    @textarea_id.setter
    def textarea_id(self, value: str) -> None:
        self._textarea_id = value

    def _get_textarea_element(self) -> Optional[ITextBuffer]:
        """Look up the textarea, None when unset or absent."""
        if self._textarea_id == '':
            return None
        return self.document.get_element_by_id(self._textarea_id)

    def log_textarea(self, message: str, log_type: LogTypeArg = None) -> None:
        """Append a prefixed line to the textarea.

        A missing textarea is reported on the console error channel
        instead; nothing is raised.
        """
        element = self._get_textarea_element()
        if element is None:
            self.log_console(TEXTAREA_NOT_FOUND, LogType.Error)
            return

        prefix = _lookup(_PREFIXES, log_type, _PREFIXES[LogType.Log])
        element.value += prefix + message + '\n'

    def log_console(self, message: str, log_type: LogTypeArg = None) -> None:
        """Write message unmodified to the matching console channel."""
        channel = _lookup(_CHANNELS, log_type, _CHANNELS[LogType.Log])
        getattr(self.console, channel)(message)

    def log(self, message: str, log_type: LogTypeArg = None) -> None:
        """Write message to every enabled sink."""
        log_to_console = False

        if self._textarea_logging_enabled is True:
            if self._textarea_id == '':
                log_to_console = True
            else:
                self.log_textarea(message, log_type)

        # Fallback and enabled console share one write
        if self._console_logging_enabled is True or log_to_console:
            self.log_console(message, log_type)

    def log_single_line(self) -> None:
        """Write a single-line divider."""
        self.log(LINE_SINGLE)

    def log_double_line(self) -> None:
        """Write a double-line divider."""
        self.log(LINE_DOUBLE)

    def clear_logs(self) -> None:
        """Empty the textarea (if found) and clear the console."""
        element = self._get_textarea_element()
        if element is not None:
            element.value = ''

        self.console.clear()

    def append_textarea_element(
        self,
        textarea_id: str = 'textlog',
        rows: int = 20,
        cols: int = 80,
        attributes: str = ''
    ) -> ITextBuffer:
        """Append a logging textarea to the page and target it."""
        self.textarea_id = textarea_id
        return self.document.append_textarea(textarea_id, rows, cols, attributes)

    def self_test(self) -> None:
        """Exercise every sink combination and severity."""
        self.console_logging_enabled = True
        self.textarea_logging_enabled = True
        self.clear_logs()
        self.log_double_line()
        self.console_logging_enabled = False
        self.log('Generic message to textarea')
        self.textarea_logging_enabled = False
        self.console_logging_enabled = True
        self.log('Generic message to console')
        self.console_logging_enabled = True
        self.textarea_logging_enabled = True
        self.log_single_line()
        self.log('Generic message to textarea and console')
        self.log('Log message to textarea and console', LogType.Log)
        self.log('Info message to textarea and console', LogType.Info)
        self.log('Debug message to textarea and console', LogType.Debug)
        self.log('Warn message to textarea and console', LogType.Warn)
        self.log('Error message to textarea and console', LogType.Error)
        self.log('Null type message to textarea and console', None)
        self.log_double_line()
