"""
Console reflection logger.

Writes "[TAG] [source] message." lines to stdout in a per-severity ANSI
colour, optionally followed by the caller's stack trace.

License: MIT
"""

import sys
import threading
import traceback
import weakref
from contextlib import contextmanager
from enum import Enum
from typing import Iterator, List, Optional, TextIO

from reflectkit_core.config import settings
from reflectkit_core.loggers.base import LogSeverity


class ConsoleColor(Enum):
    """Console foreground colours and their ANSI escape sequences."""

    DEFAULT = "\033[39m"
    BLACK = "\033[30m"
    DARK_RED = "\033[31m"
    DARK_GREEN = "\033[32m"
    DARK_YELLOW = "\033[33m"
    DARK_BLUE = "\033[34m"
    DARK_MAGENTA = "\033[35m"
    DARK_CYAN = "\033[36m"
    GRAY = "\033[37m"
    DARK_GRAY = "\033[90m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"

    @property
    def escape(self) -> str:
        return self.value


# Serializes whole coloured records; the foreground colour is shared by every
# writer of a stream.
_console_lock = threading.RLock()

# Last foreground colour written to each stream; entries go away with the stream.
_foreground_colors: "weakref.WeakKeyDictionary[TextIO, ConsoleColor]" = (
    weakref.WeakKeyDictionary()
)


def get_foreground_color(stream: TextIO) -> ConsoleColor:
    return _foreground_colors.get(stream, ConsoleColor.DEFAULT)


def set_foreground_color(stream: TextIO, color: ConsoleColor) -> None:
    with _console_lock:
        stream.write(color.escape)
        _foreground_colors[stream] = color


@contextmanager
def foreground(stream: TextIO, color: ConsoleColor) -> Iterator[None]:
    """Apply ``color`` for the duration of the block, then restore the previous one."""
    with _console_lock:
        previous = get_foreground_color(stream)
        set_foreground_color(stream, color)
        try:
            yield
        finally:
            set_foreground_color(stream, previous)


def _format_caller_stack() -> str:
    # Drop this helper and the log_* method that called it.
    frames = traceback.extract_stack()[:-2]
    return "".join(traceback.format_list(frames)).rstrip("\n")


def _format_fault(fault: BaseException) -> str:
    return "".join(traceback.format_exception(type(fault), fault, fault.__traceback__)).rstrip(
        "\n"
    )


def _format_line(severity: LogSeverity, source: Optional[str], message: Optional[str]) -> str:
    source = source or ""
    if message:
        return f"[{severity.tag}] [{source}] {message}."
    return f"[{severity.tag}] [{source}]"


class ConsoleReflectionToolsLogger:
    """
    Logs reflection messages to the console.

    Attributes:
        debug_color: Colour of debug messages (default: DARK_GRAY)
        info_color: Colour of info messages (default: GRAY)
        warning_color: Colour of warning messages (default: YELLOW)
        error_color: Colour of error messages (default: RED)
        log_debug_stack_trace: Append the caller's stack to debug messages (default: False)
        log_info_stack_trace: Append the caller's stack to info messages (default: False)
        log_warning_stack_trace: Append the caller's stack to warning messages (default: False)
        log_error_stack_trace: Append the caller's stack to error messages (default: True).
            Never applied when an exception is logged, since it carries its own traceback.

    Example:
        ```python
        logger = ConsoleReflectionToolsLogger()
        logger.log_info("Accessor", "Generated getter")
        # [INF] [Accessor] Generated getter.
        ```
    """

    def __init__(self, stream: Optional[TextIO] = None, colors: Optional[bool] = None) -> None:
        self._stream = stream
        self.colors = settings.console_colors if colors is None else colors

        self.debug_color = ConsoleColor.DARK_GRAY
        self.info_color = ConsoleColor.GRAY
        self.warning_color = ConsoleColor.YELLOW
        self.error_color = ConsoleColor.RED

        self.log_debug_stack_trace = False
        self.log_info_stack_trace = False
        self.log_warning_stack_trace = False
        self.log_error_stack_trace = True

    @property
    def stream(self) -> TextIO:
        """Target stream; the current sys.stdout unless one was given."""
        return self._stream if self._stream is not None else sys.stdout

    def log_debug(self, source: Optional[str], message: Optional[str]) -> None:
        lines = [_format_line(LogSeverity.DEBUG, source, message)]
        if self.log_debug_stack_trace:
            lines.append(_format_caller_stack())
        self._write(self.debug_color, lines)

    def log_info(self, source: Optional[str], message: Optional[str]) -> None:
        lines = [_format_line(LogSeverity.INFO, source, message)]
        if self.log_info_stack_trace:
            lines.append(_format_caller_stack())
        self._write(self.info_color, lines)

    def log_warning(self, source: Optional[str], message: Optional[str]) -> None:
        lines = [_format_line(LogSeverity.WARNING, source, message)]
        if self.log_warning_stack_trace:
            lines.append(_format_caller_stack())
        self._write(self.warning_color, lines)

    def log_error(
        self,
        source: Optional[str],
        fault: Optional[BaseException] = None,
        message: Optional[str] = None,
    ) -> None:
        lines: List[str] = []
        if message:
            lines.append(_format_line(LogSeverity.ERROR, source, message))
        if fault is not None:
            lines.append(_format_fault(fault))

        if not lines:
            lines.append(_format_line(LogSeverity.ERROR, source, None))
        elif fault is None and self.log_error_stack_trace:
            lines.append(_format_caller_stack())

        self._write(self.error_color, lines)

    def _write(self, color: ConsoleColor, lines: List[str]) -> None:
        stream = self.stream
        text = "".join(line + "\n" for line in lines)

        with _console_lock:
            if self.colors:
                with foreground(stream, color):
                    stream.write(text)
            else:
                stream.write(text)
            stream.flush()
