"""Logger configuration record and its value types.

Options are merged as a shallow overlay: keys present in an update replace
the stored value, everything else is kept. Style-valued options accept
either a callable or a color name from `tintlog.core.styles.CODES`.
"""
from __future__ import annotations
from dataclasses import dataclass, field, fields
from typing import Any, Callable, Dict, Mapping, Union

from ..core.errors import UnknownOptionError
from ..core.levels import LogLevel
from ..core.styles import Style, magenta, style_named

@dataclass(frozen=True)
class Component:
    # A component without an id is displayed but never claimed in the registry.
    id: str | None
    name: str | None = None

    @property
    def label(self) -> str:
        return self.name or self.id or ""

@dataclass(frozen=True)
class LiteralPrefix:
    text: str

    def resolve(self) -> str:
        return self.text

@dataclass(frozen=True)
class ComputedPrefix:
    producer: Callable[[], str]

    def resolve(self) -> str:
        return self.producer()

PrefixSource = Union[LiteralPrefix, ComputedPrefix]

def as_prefix_source(value: Any) -> PrefixSource | None:
    if value is None or isinstance(value, (LiteralPrefix, ComputedPrefix)):
        return value
    if isinstance(value, str):
        return LiteralPrefix(value)
    if callable(value):
        return ComputedPrefix(value)
    raise TypeError(f"show_prefix must be a string or a callable, got {type(value).__name__}")

def as_component(value: Any) -> Component | None:
    if value is None or isinstance(value, Component):
        return value
    if isinstance(value, str):
        return Component(value)
    if isinstance(value, Mapping):
        cid = value.get("id")
        return Component(None if cid is None else str(cid), value.get("name"))
    raise TypeError(f"component must be a Component, mapping or id string, got {type(value).__name__}")

def as_style(value: Style | str) -> Style:
    return style_named(value) if isinstance(value, str) else value

def _style_map(value: Mapping[str, Style | str] | None) -> Dict[str, Style]:
    return {k: as_style(v) for k, v in (value or {}).items()}

_COERCE: Dict[str, Callable[[Any], Any]] = {
    "level": LogLevel.parse,
    "show_prefix": as_prefix_source,
    "component": as_component,
    "colorized": _style_map,
    "context_colors": _style_map,
    "default_component_color": as_style,
}

@dataclass
class LoggerOptions:
    level: LogLevel = LogLevel.INFO
    cluster: int | None = None
    show_prefix: PrefixSource | None = None
    component: Component | None = None
    colorized: Dict[str, Style] = field(default_factory=dict)
    context_colors: Dict[str, Style] = field(default_factory=dict)
    default_component_color: Style = magenta
    timezone: bool = False
    # Legacy flag; its presence in an update copies component.id into component.name.
    module: bool | None = None

    @classmethod
    def field_names(cls) -> frozenset[str]:
        return frozenset(f.name for f in fields(cls))

    def normalize_update(self, update: Mapping[str, Any]) -> Dict[str, Any]:
        """Validate keys and coerce values of an update without applying it."""
        known = self.field_names()
        out: Dict[str, Any] = {}
        for key, value in update.items():
            if key not in known:
                raise UnknownOptionError(key)
            coerce = _COERCE.get(key)
            out[key] = coerce(value) if coerce else value
        return out

    def merge(self, update: Mapping[str, Any]) -> Dict[str, Any]:
        """Overlay `update` in place and return the normalized update."""
        normalized = self.normalize_update(update)
        for key, value in normalized.items():
            setattr(self, key, value)
        return normalized

    def snapshot(self) -> Dict[str, Any]:
        """Independent copy of every field, suitable as constructor options."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["colorized"] = dict(self.colorized)
        data["context_colors"] = dict(self.context_colors)
        return data
