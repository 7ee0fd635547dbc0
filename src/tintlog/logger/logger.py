"""
Leveled, colorized console logger.

Every Logger belongs to a LoggerRegistry, which lets any instance find its
siblings by id or by the component they speak for. Configuration methods
mutate the instance and return it so calls can be chained.
"""
from __future__ import annotations
import uuid
from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, Mapping

from ..core import clock
from ..core.levels import LogLevel, Method, is_enabled, stream_for
from .format import format_message
from .options import ComputedPrefix, LoggerOptions
from .registry import LoggerRegistry

class Logger:
    def __init__(self, registry: LoggerRegistry, options: Mapping[str, Any] | None = None, **overrides: Any):
        self._id = str(uuid.uuid4())
        self.registry = registry
        self.options = LoggerOptions()
        self.prefix = ""
        self.clock: Callable[[], datetime] = clock.now
        self.set_options(options, **overrides)

    @property
    def id(self) -> str:
        return self._id

    def __repr__(self) -> str:
        comp = self.options.component.id if self.options.component else None
        return f"Logger(id={self._id!r}, level={self.options.level.name}, component={comp!r})"

    # --- configuration -------------------------------------------------------
    def set_options(self, options: Mapping[str, Any] | None = None, **overrides: Any) -> Logger:
        update = {**(options or {}), **overrides}
        applied = self.options.merge(update)
        comp = self.options.component
        if applied.get("module") is not None and comp is not None and comp.id is not None and comp.name is not None:
            self.options.component = replace(comp, name=comp.id)
        source = applied.get("show_prefix")
        if isinstance(source, ComputedPrefix):
            self.prefix = source.resolve()
        elif source is not None and source.text:
            self.prefix = source.text
        self.registry.register(self)
        if self.options.component is not None and self.options.component.id:
            self.registry.claim_component(self.options.component.id, self._id)
        return self

    def set_global_level(self, level: LogLevel | int | str) -> Logger:
        for logger in self.registry:
            logger.set_options(level=level)
        return self

    def get_by_id(self, logger_id: str) -> Logger | None:
        return self.registry.by_id(logger_id)

    def get_by_component(self, component_id: str) -> Logger | None:
        return self.registry.by_component(component_id)

    def fork(self, options: Mapping[str, Any] | None = None, **overrides: Any) -> Logger:
        """Create an independent logger seeded with a copy of this one's options."""
        child = Logger(self.registry, {**self.options.snapshot(), **(options or {}), **overrides})
        child.clock = self.clock
        return child

    # --- emission ------------------------------------------------------------
    def is_enabled_for(self, level: Method) -> bool:
        return is_enabled(level, self.options.level)

    def format(self, level: Method, message: str, context: str | None = None) -> str:
        return format_message(level, message, context, self.options, self.prefix, self.clock())

    def _emit(self, level: Method, message: str, context: str | None) -> Logger:
        if not self.is_enabled_for(level):
            return self
        stream = stream_for(level)
        stream.write(self.format(level, message, context) + "\n")
        return self

    def error(self, message: str, context: str | None = None) -> Logger: return self._emit("error", message, context)
    def warn(self, message: str, context: str | None = None) -> Logger: return self._emit("warn", message, context)
    def info(self, message: str, context: str | None = None) -> Logger: return self._emit("info", message, context)
    def debug(self, message: str, context: str | None = None) -> Logger: return self._emit("debug", message, context)

    warning = warn
