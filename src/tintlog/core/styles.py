"""Terminal styles backed by colorama.

A style is a plain callable taking text and returning it wrapped in ANSI
codes. Colors can be switched off at runtime with TINTLOG_COLOR_DISABLED=1
or the NO_COLOR convention; styles then return text unchanged.
"""
from __future__ import annotations
import os
import re
from typing import Callable, Dict

from colorama import Fore, Style as _AnsiStyle, just_fix_windows_console

from .errors import UnknownStyleError

just_fix_windows_console()

Style = Callable[[str], str]

RESET = _AnsiStyle.RESET_ALL

CODES: Dict[str, str] = {
    "black": Fore.BLACK,
    "red": Fore.RED,
    "green": Fore.GREEN,
    "yellow": Fore.YELLOW,
    "blue": Fore.BLUE,
    "magenta": Fore.MAGENTA,
    "cyan": Fore.CYAN,
    "white": Fore.WHITE,
    "gray": Fore.LIGHTBLACK_EX,
    "bright_red": Fore.LIGHTRED_EX,
    "bright_green": Fore.LIGHTGREEN_EX,
    "bright_yellow": Fore.LIGHTYELLOW_EX,
    "bright_blue": Fore.LIGHTBLUE_EX,
    "bright_magenta": Fore.LIGHTMAGENTA_EX,
    "bright_cyan": Fore.LIGHTCYAN_EX,
    "bright_white": Fore.LIGHTWHITE_EX,
    "bold": _AnsiStyle.BRIGHT,
    "dim": _AnsiStyle.DIM,
}

def colors_enabled() -> bool:
    if os.environ.get("TINTLOG_COLOR_DISABLED") == "1":
        return False
    return "NO_COLOR" not in os.environ

def colored_text(text: str, color: str) -> str:
    """Paint `text` with the named color, or return it untouched while colors are off."""
    code = CODES.get(color)
    if code is None:
        raise UnknownStyleError(color)
    if not colors_enabled():
        return text
    return f"{code}{text}{RESET}"

def style_named(color: str) -> Style:
    """Return a reusable style for a color name from CODES."""
    if color not in CODES:
        raise UnknownStyleError(color)
    def apply(text: str) -> str:
        return colored_text(text, color)
    apply.__name__ = color
    return apply

def plain(text: str) -> str:
    return text

green = style_named("green")
red = style_named("red")
magenta = style_named("magenta")
bright_red = style_named("bright_red")
bright_yellow = style_named("bright_yellow")
bright_blue = style_named("bright_blue")

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*m")

def strip_ansi(s: str) -> str:
    return ANSI_ESCAPE_RE.sub('', s)

__all__ = [
    "Style", "CODES", "RESET", "colors_enabled", "colored_text", "style_named",
    "plain", "green", "red", "magenta", "bright_red", "bright_yellow",
    "bright_blue", "strip_ansi",
]
