"""Default log output and library version information."""

from __future__ import annotations

import sys
import threading
from enum import IntEnum
from typing import Optional, TextIO

VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 9


class LogLevel(IntEnum):
    VERBOSE = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


_PREFIXES = {
    LogLevel.VERBOSE: "[VERBOSE]: ",
    LogLevel.INFO: "[INFO]:    ",
    LogLevel.WARNING: "[WARNING]: ",
    LogLevel.ERROR: "[ERROR]:   ",
}

_lock = threading.Lock()


def format_log_line(level: LogLevel, message: str) -> str:
    """The line the default logger writes for ``message``, newline included."""
    try:
        prefix = _PREFIXES[LogLevel(level)]
    except ValueError:
        raise ValueError(f"unknown log level {level!r}") from None
    return f"{prefix}{message}\n"


def default_logger(level: LogLevel, message: str, stream: Optional[TextIO] = None) -> None:
    """Write one formatted log line to ``stream`` (standard output by default)."""
    line = format_log_line(level, message)
    out = sys.stdout if stream is None else stream
    with _lock:
        out.write(line)
        out.flush()


def version_number() -> int:
    """The version packed as major*1000000 + minor*1000 + patch."""
    return VERSION_MAJOR * 1000000 + VERSION_MINOR * 1000 + VERSION_PATCH


def version_string() -> str:
    """The version as major.MM.PPP."""
    return f"{VERSION_MAJOR}.{VERSION_MINOR:02d}.{VERSION_PATCH:03d}"