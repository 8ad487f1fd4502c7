from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings

from src.pipeline_config import TranscriptionProviderName


class Settings(BaseSettings):
    """Application settings validated via Pydantic.

    Values are loaded from environment variables and/or a .env file.
    """

    # Transcription
    transcription_provider: TranscriptionProviderName = TranscriptionProviderName.MOCK
    assemblyai_api_key: str = ""
    mock_transcription_delay_seconds: float = 2.0

    # Summarisation
    summarizer_model: str = "extractive-lead-3"

    # Uploads
    upload_dir: str = "./uploads"
    max_upload_bytes: int = 10 * 1024 * 1024

    # App config
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance.

    Gracefully handles missing .env files (e.g. in CI/testing) by falling
    back to environment variables and defaults.
    """
    try:
        return Settings()
    except Exception:
        # If .env is missing or unreadable, build settings from env vars only.
        return Settings(_env_file=None)  # type: ignore[call-arg]


settings = get_settings()
