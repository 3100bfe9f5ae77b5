"""Log messages to standard error with a compiler-like prefix and colour."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass
from typing import Any, TextIO

from .urids import URIDs


class LogLevel(enum.IntEnum):
    """Severity of a log message, with syslog numbering."""

    ERR = 3
    WARNING = 4
    INFO = 6
    DEBUG = 7


_PREFIXES: dict[LogLevel, tuple[int, str]] = {
    LogLevel.ERR: (31, "error: "),
    LogLevel.WARNING: (33, "warning: "),
    LogLevel.DEBUG: (32, "trace: "),
}


def _is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        return False


def ansi_start(stream: TextIO, color: int) -> bool:
    """Set the foreground colour if `stream` is a terminal; return whether it was."""
    if _is_tty(stream):
        stream.write(f"\033[0;{color}m")
        return True
    return False


def ansi_reset(stream: TextIO) -> None:
    """Reset the foreground colour if `stream` is a terminal."""
    if _is_tty(stream):
        stream.write("\033[0m")
        stream.flush()


def log_message(level: LogLevel, fmt: str, *args: Any) -> int:
    """Write a printf-style message to stderr; return the message length."""
    stream = sys.stderr
    fancy = False
    prefix = _PREFIXES.get(LogLevel(level))
    if prefix is not None:
        color, text = prefix
        fancy = ansi_start(stream, color)
        stream.write(text)

    message = fmt % args
    stream.write(message)

    if fancy:
        ansi_reset(stream)

    return len(message)


@dataclass
class Log:
    """Log sink for plugins, dispatching on the URID of the message type."""

    urids: URIDs
    tracing: bool = False

    def printf(self, urid: int, fmt: str, *args: Any) -> int:
        """Log a plugin message of type `urid`; return the message length."""
        if urid == self.urids.log_Trace:
            return log_message(LogLevel.DEBUG, fmt, *args) if self.tracing else 0
        if urid == self.urids.log_Error:
            return log_message(LogLevel.ERR, fmt, *args)
        if urid == self.urids.log_Warning:
            return log_message(LogLevel.WARNING, fmt, *args)

        message = fmt % args
        sys.stderr.write(message)
        return len(message)