"""Tests for settings loading."""

from __future__ import annotations

from floorball_cal.config.settings import AppSettings, load_settings


def test_defaults():
    loaded = AppSettings(_env_file=None)
    assert loaded.base_url == "https://saisonmanager.de"
    assert loaded.accept_language.startswith("de-DE")
    assert loaded.calendar_namespace == "floorball-cal"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("FLOORBALL_CAL_BASE_URL", "http://localhost:8080")
    monkeypatch.setenv("FLOORBALL_CAL_LOG_LEVEL", "debug")
    loaded = load_settings()
    assert loaded.base_url == "http://localhost:8080"
    assert loaded.log_level == "DEBUG"


def test_invalid_log_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("FLOORBALL_CAL_LOG_LEVEL", "chatty")
    assert load_settings().log_level == "INFO"
