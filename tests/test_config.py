"""Tests for environment-based settings."""

import logging

import pytest

from logstash_layout.config import Settings, get_settings


def test_defaults(monkeypatch) -> None:
    for name in ("LOCATION_INFO", "IGNORE_THROWABLE", "TIMEZONE", "SOURCE_HOST", "LOG_LEVEL"):
        monkeypatch.delenv(f"LOGSTASH_LAYOUT_{name}", raising=False)
    settings = Settings()
    assert settings.location_info is True
    assert settings.ignore_throwable is False
    assert settings.tz is None
    assert settings.source_host is None
    assert settings.parsed_log_level == logging.INFO


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("LOGSTASH_LAYOUT_LOCATION_INFO", "false")
    monkeypatch.setenv("LOGSTASH_LAYOUT_IGNORE_THROWABLE", "true")
    monkeypatch.setenv("LOGSTASH_LAYOUT_SOURCE_HOST", "env-host")
    monkeypatch.setenv("LOGSTASH_LAYOUT_LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.location_info is False
    assert settings.ignore_throwable is True
    assert settings.source_host == "env-host"
    assert settings.parsed_log_level == logging.DEBUG
    assert get_settings() is settings


def test_timezone_resolution() -> None:
    assert Settings(timezone="UTC").tz.key == "UTC"


def test_unknown_timezone() -> None:
    with pytest.raises(ValueError):
        Settings(timezone="Mars/Olympus_Mons").tz


def test_unknown_log_level_defaults_to_info() -> None:
    assert Settings(log_level="chatty").parsed_log_level == logging.INFO
