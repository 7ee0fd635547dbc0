# Ensure src/ is on sys.path for tests
import sys, pathlib
from datetime import datetime, timezone

import pytest

root = pathlib.Path(__file__).resolve().parent
src = root / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from tintlog.logger import LoggerRegistry

FIXED_NOW = datetime(2024, 1, 15, 20, 30, 45, tzinfo=timezone.utc)  # 12:30:45 PM PST

@pytest.fixture
def registry():
    return LoggerRegistry()

@pytest.fixture
def no_color(monkeypatch):
    monkeypatch.setenv("TINTLOG_COLOR_DISABLED", "1")

@pytest.fixture
def with_color(monkeypatch):
    monkeypatch.delenv("TINTLOG_COLOR_DISABLED", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)

@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW
