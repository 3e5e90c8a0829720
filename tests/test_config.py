"""
Tests for application config (Settings).

Ensures settings load from the environment and defaults are sane.
"""
from __future__ import annotations

import pytest

from marketgenius.config import (
    IMAGE_ASPECT_RATIOS,
    IMAGE_STYLES,
    SPEECH_VOICES,
    Settings,
    get_settings,
    settings,
)


def test_settings_loads_with_defaults() -> None:
    """Settings load from environment (or defaults)."""
    assert settings.app_name == "MarketGenius"
    assert settings.app_version
    assert settings.storage_backend in {"database", "memory"}


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_env_prefix(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MARKETGENIUS_GEMINI_API_KEY", "from-env")
    monkeypatch.setenv("MARKETGENIUS_STORAGE_BACKEND", "memory")
    monkeypatch.setenv("MARKETGENIUS_TEXT_MODEL", "gemini-test")
    loaded = Settings()
    assert loaded.gemini_api_key == "from-env"
    assert loaded.storage_backend == "memory"
    assert loaded.text_model == "gemini-test"


def test_missing_key_warns(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    monkeypatch.delenv("MARKETGENIUS_GEMINI_API_KEY", raising=False)
    with caplog.at_level("WARNING"):
        Settings(gemini_api_key=None)
    assert "MARKETGENIUS_GEMINI_API_KEY is not set" in caplog.text


def test_media_option_lists() -> None:
    assert SPEECH_VOICES[0] == settings.default_speech_voice
    assert IMAGE_ASPECT_RATIOS == ["1:1", "16:9", "9:16"]
    assert IMAGE_STYLES[0] == "None"
