"""Speech-to-text providers for audio meeting files.

``MockTranscriptionProvider`` stands in for a real service and returns one of
a fixed set of transcripts. ``AssemblyAITranscriptionProvider`` calls the
AssemblyAI API. Callers depend only on the ``TranscriptionProvider`` protocol.
"""

from __future__ import annotations

import asyncio
import logging
import random
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from src.errors import ConfigurationError, TranscriptionError
from src.ingestion.models import TranscriptionResult
from src.pipeline_config import TranscriptionProviderName

if TYPE_CHECKING:
    from src.config import Settings

logger = logging.getLogger(__name__)

MOCK_TRANSCRIPTS: tuple[str, ...] = (
    "Alice: Welcome everyone to our quarterly review meeting. Let's start with the Q3 "
    "project status. Bob: The development team has completed 80% of the mobile app "
    "features. Carol: Marketing has finalized the campaign strategy for the product "
    "launch. Dave: I suggest we run internal testing by Friday before the client demo "
    "next Tuesday.",
    "Emma: Let's discuss the budget allocation for next quarter. Frank: We need to "
    "increase the marketing budget by 15%. Grace: I will prepare a detailed comparison "
    "report for all departments by Wednesday. Henry: We should schedule a follow-up "
    "meeting after Grace shares the report.",
    "Jack: We need to finalize the design specs for the new website. Karen: I will "
    "draft the wireframes and share by Wednesday. Leo: I can create the mockups and "
    "provide feedback by Friday. Mia: Let's hold a review session on Friday afternoon "
    "to consolidate feedback.",
)

MOCK_CONFIDENCE = 0.95
MOCK_DURATION_SECONDS = 300


class TranscriptionProvider(Protocol):
    """Anything that can turn an audio file into a transcript."""

    async def transcribe(self, path: str | Path) -> TranscriptionResult: ...


class MockTranscriptionProvider:
    """Returns a canned transcript after an artificial, non-blocking delay.

    The audio file is never opened. Pass a seeded ``random.Random`` to make
    the choice reproducible.
    """

    def __init__(self, rng: random.Random | None = None, delay_seconds: float = 2.0) -> None:
        self._rng = rng or random.Random()
        self._delay_seconds = delay_seconds

    async def transcribe(self, path: str | Path) -> TranscriptionResult:
        text = self._rng.choice(MOCK_TRANSCRIPTS)
        if self._delay_seconds > 0:
            await asyncio.sleep(self._delay_seconds)
        logger.info("Mock transcription of %s (%d chars)", path, len(text))
        return TranscriptionResult(
            text=text,
            confidence=MOCK_CONFIDENCE,
            language="en",
            duration=MOCK_DURATION_SECONDS,
        )


class AssemblyAITranscriptionProvider:
    """Transcribes audio files with the AssemblyAI SDK.

    The SDK is synchronous, so each call runs in a worker thread to keep the
    event loop free.
    """

    def __init__(self, api_key: str) -> None:
        self._api_key = api_key

    async def transcribe(self, path: str | Path) -> TranscriptionResult:
        return await asyncio.to_thread(self._transcribe_sync, str(path))

    def _transcribe_sync(self, path: str) -> TranscriptionResult:
        """Blocking transcription call.

        Raises:
            TranscriptionError: The provider rejected the audio, or the call
                itself failed (bad key, network, outage).
        """
        import assemblyai as aai  # type: ignore[import-untyped]  # no stubs; import inside function

        aai.settings.api_key = self._api_key
        transcriber = aai.Transcriber()
        # speaker_labels=True enables diarization; without it the API returns a
        # single flat text block and no "Speaker X:" labels can be rendered.
        config = aai.TranscriptionConfig(speaker_labels=True)

        try:
            transcript = transcriber.transcribe(path, config=config)
        except Exception as exc:
            msg = f"Transcription service unavailable: {exc}"
            raise TranscriptionError(msg) from exc

        if transcript.status == aai.TranscriptStatus.error:
            msg = f"Transcription failed: {transcript.error}"
            raise TranscriptionError(msg)

        utterances = transcript.utterances or []
        if utterances:
            text = "\n".join(f"Speaker {u.speaker}: {u.text}" for u in utterances)
        else:
            text = transcript.text or ""

        return TranscriptionResult(
            text=text,
            confidence=transcript.confidence if transcript.confidence is not None else 0.0,
            language="en",
            duration=transcript.audio_duration,
        )


def get_transcription_provider(settings: Settings) -> TranscriptionProvider:
    """Build the provider selected by ``settings.transcription_provider``.

    Raises:
        ConfigurationError: AssemblyAI is selected but no API key is set.
    """
    name = TranscriptionProviderName(settings.transcription_provider)

    if name is TranscriptionProviderName.ASSEMBLYAI:
        if not settings.assemblyai_api_key:
            msg = "Audio transcription via AssemblyAI requires ASSEMBLYAI_API_KEY."
            raise ConfigurationError(msg)
        return AssemblyAITranscriptionProvider(settings.assemblyai_api_key)

    return MockTranscriptionProvider(delay_seconds=settings.mock_transcription_delay_seconds)
