from __future__ import annotations

class TintlogError(Exception):
    """Base for internal errors."""

class InvalidLevelError(TintlogError, ValueError):
    def __init__(self, value: object):
        super().__init__(f"Unknown log level {value!r}")
        self.value = value

class UnknownOptionError(TintlogError, TypeError):
    def __init__(self, key: str):
        super().__init__(f"Unknown logger option '{key}'")
        self.key = key

class UnknownStyleError(TintlogError, ValueError):
    def __init__(self, name: str):
        super().__init__(f"Unknown style '{name}'")
        self.name = name

class SettingsError(TintlogError):
    def __init__(self, path: str, detail: str):
        super().__init__(f"Failed loading settings '{path}': {detail}")
        self.path = path
        self.detail = detail
