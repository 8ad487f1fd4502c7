"""Data models for transcript acquisition."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FileKind(str, Enum):
    """How an uploaded meeting file is turned into a transcript."""

    AUDIO = "audio"
    TEXT = "text"


@dataclass
class TranscriptionResult:
    """Output of a speech-to-text provider."""

    text: str
    confidence: float
    language: str = "en"
    duration: float | None = None  # seconds
