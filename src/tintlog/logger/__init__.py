from .logger import Logger
from .options import Component, ComputedPrefix, LiteralPrefix, LoggerOptions
from .registry import LoggerRegistry

__all__ = ["Logger", "LoggerRegistry", "LoggerOptions", "Component", "LiteralPrefix", "ComputedPrefix"]
