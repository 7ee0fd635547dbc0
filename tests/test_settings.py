import json
import os
import pytest
from tintlog.core.errors import SettingsError
from tintlog.core.styles import strip_ansi
from tintlog.logger import Logger
from tintlog.system.settings import Settings, SettingsData

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("TINTLOG_LEVEL", "TINTLOG_TIMEZONE", "TINTLOG_PREFIX", "TINTLOG_COLOR_DISABLED"):
        monkeypatch.delenv(var, raising=False)


def test_missing_file_uses_defaults(tmp_path):
    settings = Settings.load(tmp_path / "none.json")
    assert settings.data == SettingsData()
    assert settings.logger_options() == {"level": "INFO", "timezone": False}


def test_loads_and_normalizes(tmp_path):
    path = tmp_path / "s.json"
    path.write_text(json.dumps({"level": "warn", "prefix": "api", "component": "svc", "timezone": 1}))
    settings = Settings.load(path)
    assert settings.data.level == "WARNING"
    assert settings.data.timezone is True
    assert settings.logger_options() == {
        "level": "WARNING", "timezone": True, "show_prefix": "api", "component": "svc",
    }


def test_invalid_values_reset(tmp_path):
    path = tmp_path / "s.json"
    path.write_text(json.dumps({"level": "loud", "prefix": ""}))
    data = Settings.load(path).data
    assert data.level == "INFO"
    assert data.prefix is None


def test_malformed_file_warns_and_falls_back(tmp_path, registry, capsys):
    path = tmp_path / "s.json"
    path.write_text("{not json")
    log = Logger(registry)
    settings = Settings.load(path, log=log)
    assert settings.data == SettingsData()
    err = strip_ansi(capsys.readouterr().err)
    assert "[WARN] [Settings]" in err
    assert "using defaults" in err


def test_read_is_strict(tmp_path):
    path = tmp_path / "s.json"
    path.write_text(json.dumps({"levle": "debug"}))
    with pytest.raises(SettingsError) as exc:
        Settings.read(path)
    assert "levle" in exc.value.detail
    path.write_text("[]")
    with pytest.raises(SettingsError):
        Settings.read(path)


def test_environment_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("TINTLOG_LEVEL", "debug")
    monkeypatch.setenv("TINTLOG_TIMEZONE", "yes")
    monkeypatch.setenv("TINTLOG_PREFIX", "env")
    monkeypatch.setenv("TINTLOG_COLOR_DISABLED", "1")
    data = Settings.load(tmp_path / "none.json").data
    assert (data.level, data.timezone, data.prefix, data.color) == ("DEBUG", True, "env", False)


def test_save_round_trip(tmp_path):
    path = tmp_path / "s.json"
    settings = Settings(SettingsData(level="ERROR", prefix="p"), path)
    settings.save()
    assert Settings.read(path) == SettingsData(level="ERROR", prefix="p")


def test_save_failure_raises(tmp_path):
    settings = Settings(SettingsData(), tmp_path / "missing" / "s.json")
    with pytest.raises(SettingsError):
        settings.save()


def test_default_path_falls_back_to_cwd(tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    assert Settings.default_path() == home / ".tintlog.json"
    monkeypatch.setattr(os, "access", lambda path, mode: False)
    monkeypatch.chdir(tmp_path)
    assert Settings.default_path() == tmp_path / ".tintlog.json"
