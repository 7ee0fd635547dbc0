"""Leveled, colorized, timestamped console logging with a per-process logger registry."""
from .core.errors import InvalidLevelError, SettingsError, TintlogError, UnknownOptionError, UnknownStyleError
from .core.levels import LogLevel
from .logger import Component, ComputedPrefix, LiteralPrefix, Logger, LoggerOptions, LoggerRegistry

__version__ = "0.1.0"

__all__ = [
    "Logger", "LoggerRegistry", "LoggerOptions", "LogLevel", "Component",
    "LiteralPrefix", "ComputedPrefix", "TintlogError", "InvalidLevelError",
    "UnknownOptionError", "UnknownStyleError", "SettingsError",
]
