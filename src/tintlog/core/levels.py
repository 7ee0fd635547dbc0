"""
Severity levels and the static dispatch table.

Lower number means higher severity. A logger's threshold names the least
severe level it still shows: DEBUG shows everything, ERROR only errors.
"""
from __future__ import annotations
import sys
from enum import IntEnum
from typing import Dict, Literal, TextIO, Tuple

from .errors import InvalidLevelError

Method = Literal["error", "warn", "info", "debug"]

class LogLevel(IntEnum):
    ERROR = 0
    WARNING = 1
    INFO = 2
    DEBUG = 3

    @classmethod
    def parse(cls, value: "LogLevel | int | str") -> "LogLevel":
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise InvalidLevelError(value)
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise InvalidLevelError(value) from None
        if isinstance(value, str):
            key = value.strip().upper()
            level = _ALIASES.get(key)
            if level is not None:
                return level
            if key.isdigit():
                return cls.parse(int(key))
        raise InvalidLevelError(value)

_ALIASES: Dict[str, LogLevel] = {
    "ERROR": LogLevel.ERROR,
    "WARN": LogLevel.WARNING,
    "WARNING": LogLevel.WARNING,
    "INFO": LogLevel.INFO,
    "DEBUG": LogLevel.DEBUG,
}

# method -> (priority, name of the sys stream it writes to)
LEVELS: Dict[Method, Tuple[LogLevel, str]] = {
    "error": (LogLevel.ERROR, "stderr"),
    "warn":  (LogLevel.WARNING, "stderr"),
    "info":  (LogLevel.INFO, "stdout"),
    "debug": (LogLevel.DEBUG, "stdout"),
}

def priority_of(method: Method) -> LogLevel:
    return LEVELS[method][0]

def stream_for(method: Method) -> TextIO:
    # Resolved on every call so replaced streams (redirection, capture) are honored.
    return getattr(sys, LEVELS[method][1])

def is_enabled(method: Method, threshold: LogLevel | int) -> bool:
    return priority_of(method) <= threshold

__all__ = ["LogLevel", "Method", "LEVELS", "priority_of", "stream_for", "is_enabled"]
