from __future__ import annotations
from datetime import datetime
from typing import Dict

from ..core import styles
from ..core.clock import format_timestamp
from ..core.levels import Method
from ..core.styles import Style
from .options import LoggerOptions

LEVEL_STYLES: Dict[Method, Style] = {
    "info": styles.green,
    "warn": styles.bright_yellow,
    "debug": styles.bright_blue,
    "error": styles.bright_red,
}

DEFAULT_CONTEXT_STYLES: Dict[str, Style] = {
    "System": styles.magenta,
    "Mongo": styles.green,
    "MongoDB": styles.green,
    "Redis": styles.red,
}

DEFAULT_PREFIX_STYLE: Style = styles.bright_blue

def context_styles(options: LoggerOptions) -> Dict[str, Style]:
    merged = dict(DEFAULT_CONTEXT_STYLES)
    merged.update(options.context_colors)
    return merged

def format_message(
    level: Method,
    message: str,
    context: str | None,
    options: LoggerOptions,
    prefix: str,
    now: datetime | None = None,
) -> str:
    """Build one log line: [prefix] [time] [LEVEL] [context] [component] message."""
    parts = []
    if prefix:
        paint = options.colorized.get(prefix, DEFAULT_PREFIX_STYLE)
        parts.append(paint(f"[{prefix}]"))
    parts.append(format_timestamp(now, show_zone=options.timezone))
    parts.append(LEVEL_STYLES[level](f"[{level.upper()}]"))
    if context:
        paint = context_styles(options).get(context, styles.plain)
        parts.append(f"[{paint(context)}]")
    if options.component is not None:
        parts.append(options.default_component_color(f"[{options.component.label}]"))
    parts.append(message)
    return " ".join(parts)
