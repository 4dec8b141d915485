from __future__ import annotations

import pytest

from app.shared.config import get_settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch):
    for name in ("START_SERVER", "HOST", "PORT", "LOG_LEVEL", "PENDLE_TIMEOUT_SECONDS", "PENDLE_MAX_PAGES"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.start_server is False
    assert settings.host == "0.0.0.0"
    assert settings.port == 8000
    assert settings.log_level == "INFO"
    assert settings.pendle_timeout_seconds is None
    assert settings.pendle_max_pages is None


@pytest.mark.parametrize(("raw", "expected"), [("true", True), ("TRUE", True), ("1", True), ("false", False), ("", False)])
def test_start_server_flag(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool):
    monkeypatch.setenv("START_SERVER", raw)

    assert get_settings().start_server is expected


def test_settings_read_overrides(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("PENDLE_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("PENDLE_MAX_PAGES", "50")

    settings = get_settings()

    assert settings.port == 9000
    assert settings.log_level == "DEBUG"
    assert settings.pendle_timeout_seconds == 2.5
    assert settings.pendle_max_pages == 50
