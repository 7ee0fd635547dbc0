from __future__ import annotations
import json, os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict

from tintlog.core.errors import InvalidLevelError, SettingsError
from tintlog.core.levels import LogLevel

if TYPE_CHECKING:
    from tintlog.logger.logger import Logger

SETTINGS_FILENAME = ".tintlog.json"

_TRUTHY = {"1", "true", "yes", "on"}

@dataclass
class SettingsData:
    level: str = "INFO"
    timezone: bool = False
    color: bool = True
    prefix: str | None = None
    component: str | None = None

    def normalize(self):
        try:
            self.level = LogLevel.parse(self.level).name
        except InvalidLevelError:
            self.level = "INFO"
        self.timezone = bool(self.timezone)
        self.color = bool(self.color)
        if not isinstance(self.prefix, str) or not self.prefix:
            self.prefix = None
        if not isinstance(self.component, str) or not self.component:
            self.component = None

class Settings:
    def __init__(self, data: SettingsData, path: Path):
        self.data = data
        self.path = path

    @staticmethod
    def default_path() -> Path:
        """~/.tintlog.json, or ./.tintlog.json when the home directory is read-only."""
        home = Path.home()
        base = home if os.access(home, os.W_OK) else Path.cwd()
        return base / SETTINGS_FILENAME

    @classmethod
    def read(cls, path: Path) -> SettingsData:
        """Parse a settings file, raising SettingsError on any problem."""
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise SettingsError(str(path), str(e)) from e
        if not isinstance(raw, dict):
            raise SettingsError(str(path), "top level must be an object")
        known = {f.name for f in fields(SettingsData)}
        unknown = sorted(set(raw) - known)
        if unknown:
            raise SettingsError(str(path), f"unknown keys: {', '.join(unknown)}")
        data = SettingsData(**raw)
        data.normalize()
        return data

    @classmethod
    def load(cls, path: Path | None = None, log: Logger | None = None) -> "Settings":
        path = path or cls.default_path()
        data = SettingsData()
        if path.exists():
            try:
                data = cls.read(path)
                if log:
                    log.debug(f"Loaded settings from {path}", "Settings")
            except SettingsError as e:
                if log:
                    log.warn(f"{e}; using defaults", "Settings")
        settings = cls(data, path)
        settings.apply_env()
        return settings

    def apply_env(self, environ: Dict[str, str] | None = None):
        env = os.environ if environ is None else environ
        if "TINTLOG_LEVEL" in env:
            self.data.level = env["TINTLOG_LEVEL"]
        if "TINTLOG_TIMEZONE" in env:
            self.data.timezone = env["TINTLOG_TIMEZONE"].strip().lower() in _TRUTHY
        if "TINTLOG_PREFIX" in env:
            self.data.prefix = env["TINTLOG_PREFIX"]
        if env.get("TINTLOG_COLOR_DISABLED") == "1":
            self.data.color = False
        self.data.normalize()

    def save(self, log: Logger | None = None):
        try:
            self.path.write_text(json.dumps(asdict(self.data), indent=2), encoding="utf-8")
        except OSError as e:
            raise SettingsError(str(self.path), str(e)) from e
        if log:
            log.debug(f"Settings saved to {self.path}", "Settings")

    def logger_options(self) -> Dict[str, Any]:
        opts: Dict[str, Any] = {"level": self.data.level, "timezone": self.data.timezone}
        if self.data.prefix:
            opts["show_prefix"] = self.data.prefix
        if self.data.component:
            opts["component"] = self.data.component
        return opts
