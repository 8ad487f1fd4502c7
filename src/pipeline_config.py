"""Pipeline configuration: provider enums and the ProcessingOptions dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TranscriptionProviderName(str, Enum):
    """Available speech-to-text providers for audio uploads."""

    MOCK = "mock"
    ASSEMBLYAI = "assemblyai"


@dataclass(frozen=True)
class ProcessingOptions:
    """Immutable per-call options for meeting processing.

    ``max_length`` and ``min_length`` bound the summary length for a
    model-backed summariser; the extractive summariser accepts and ignores
    them.
    """

    max_length: int = 180
    min_length: int = 30
