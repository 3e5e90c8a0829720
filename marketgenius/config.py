"""
MarketGenius Configuration

Environment-based configuration for the MarketGenius content service.
"""
import logging
from functools import lru_cache
from typing import Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _app_version_from_package() -> str:
    """Read version from pyproject.toml, the single source of truth."""
    try:
        from importlib.metadata import version
        return version("marketgenius")
    except Exception:
        pass
    # Fallback: parse pyproject.toml directly (dev / non-installed mode)
    try:
        from pathlib import Path
        import re
        pyproject = Path(__file__).resolve().parent.parent / "pyproject.toml"
        match = re.search(r'^version\s*=\s*"([^"]+)"', pyproject.read_text(), re.MULTILINE)
        if match:
            return match.group(1)
    except Exception:
        pass
    return "0.0.0-unknown"


# Voices offered by the speech endpoint. The first entry is the default.
SPEECH_VOICES: list[str] = ["Kore", "Puck", "Charon", "Zephyr", "Fenrir"]

# Aspect ratios accepted by the image model.
IMAGE_ASPECT_RATIOS: list[str] = ["1:1", "16:9", "9:16"]

# Style suffixes offered by the image generator ("None" leaves the prompt untouched).
IMAGE_STYLES: list[str] = [
    "None",
    "Photorealistic",
    "Digital Art",
    "Van Gogh painting",
    "Black and white",
    "Fantasy",
]

# Sample rates of the live audio pipeline (Hz). Input is what the model
# expects from the microphone; output is what it streams back.
LIVE_INPUT_SAMPLE_RATE: int = 16000
LIVE_OUTPUT_SAMPLE_RATE: int = 24000
SPEECH_SAMPLE_RATE: int = 24000

# Default brief-driven article length, in words.
DEFAULT_WORD_COUNT: int = 1500


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Service Info (app_version: single source is pyproject.toml when installed; else fallback)
    app_name: str = "MarketGenius"
    app_version: str = _app_version_from_package()
    debug: bool = False

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 10010

    # Persistence
    # SQLite (dev): sqlite+aiosqlite:///./marketgenius.db
    database_url: Optional[str] = None
    storage_backend: str = "database"  # "database" | "memory"

    # Hosted generation service (Gemini)
    gemini_api_key: Optional[str] = None
    generation_timeout: int = 120  # seconds

    # Model routing
    text_model: str = "gemini-2.5-pro"
    brief_model: str = "gemini-2.5-pro"
    fast_model: str = "gemini-2.5-flash"  # tips and chat
    image_model: str = "imagen-4.0-generate-001"
    image_edit_model: str = "gemini-2.5-flash-image"
    speech_model: str = "gemini-2.5-flash-preview-tts"
    live_model: str = "gemini-2.5-flash-native-audio-preview-09-2025"

    # Rate limit applied to every route that calls the model (slowapi syntax)
    generation_rate_limit: str = "20/minute"

    # Voices
    default_speech_voice: str = "Kore"
    live_voice: str = "Zephyr"

    # CORS Settings (fail closed: no default origins)
    # Local dev: ["http://localhost:5173"]. Never use "*" in production.
    cors_origins: list[str] = []

    @model_validator(mode="after")
    def _warn_missing_api_key(self) -> "Settings":
        """Warn when no generation key is configured; every model call will then fail."""
        if not self.gemini_api_key:
            logging.getLogger(__name__).warning(
                "MARKETGENIUS_GEMINI_API_KEY is not set; generation requests will fail."
            )
        return self

    @model_validator(mode="after")
    def _warn_cors_wildcard_in_production(self) -> "Settings":
        """Warn when CORS allows all origins in non-debug (production) mode."""
        if not self.debug and self.cors_origins and "*" in self.cors_origins:
            logging.getLogger(__name__).warning(
                "CORS allows all origins (*) with MARKETGENIUS_DEBUG=false. "
                "Set MARKETGENIUS_CORS_ORIGINS to exact origins in production."
            )
        return self

    model_config = SettingsConfigDict(
        env_prefix="MARKETGENIUS_",
        env_file=".env",
        env_file_encoding="utf-8",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience access
settings = get_settings()
