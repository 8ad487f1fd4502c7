"""Tests for Settings, ProcessingOptions, and the provider enum."""

from __future__ import annotations

import pytest

from src.config import Settings, get_settings
from src.pipeline_config import ProcessingOptions, TranscriptionProviderName

# ---------------------------------------------------------------------------
# Enum tests
# ---------------------------------------------------------------------------


class TestTranscriptionProviderName:
    def test_values(self) -> None:
        assert TranscriptionProviderName.MOCK.value == "mock"
        assert TranscriptionProviderName.ASSEMBLYAI.value == "assemblyai"

    def test_from_string(self) -> None:
        assert TranscriptionProviderName("mock") is TranscriptionProviderName.MOCK
        assert TranscriptionProviderName("assemblyai") is TranscriptionProviderName.ASSEMBLYAI

    def test_invalid_raises(self) -> None:
        with pytest.raises(ValueError):
            TranscriptionProviderName("whisper")

    def test_is_str_subclass(self) -> None:
        """Enum values behave as plain strings for JSON serialization."""
        assert isinstance(TranscriptionProviderName.MOCK, str)


# ---------------------------------------------------------------------------
# ProcessingOptions tests
# ---------------------------------------------------------------------------


class TestProcessingOptions:
    def test_defaults(self) -> None:
        opts = ProcessingOptions()
        assert opts.max_length == 180
        assert opts.min_length == 30

    def test_custom_values(self) -> None:
        opts = ProcessingOptions(max_length=60, min_length=5)
        assert opts.max_length == 60
        assert opts.min_length == 5

    def test_immutable(self) -> None:
        opts = ProcessingOptions()
        with pytest.raises(AttributeError):
            opts.max_length = 10  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Settings tests
# ---------------------------------------------------------------------------


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for var in ("TRANSCRIPTION_PROVIDER", "MAX_UPLOAD_BYTES", "UPLOAD_DIR"):
            monkeypatch.delenv(var, raising=False)

        cfg = Settings(_env_file=None)  # type: ignore[call-arg]

        assert cfg.transcription_provider is TranscriptionProviderName.MOCK
        assert cfg.max_upload_bytes == 10 * 1024 * 1024
        assert cfg.upload_dir == "./uploads"

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRANSCRIPTION_PROVIDER", "assemblyai")
        monkeypatch.setenv("MOCK_TRANSCRIPTION_DELAY_SECONDS", "0.5")

        cfg = Settings(_env_file=None)  # type: ignore[call-arg]

        assert cfg.transcription_provider is TranscriptionProviderName.ASSEMBLYAI
        assert cfg.mock_transcription_delay_seconds == 0.5

    def test_invalid_provider_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRANSCRIPTION_PROVIDER", "whisper")
        with pytest.raises(ValueError):
            Settings(_env_file=None)  # type: ignore[call-arg]

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()
