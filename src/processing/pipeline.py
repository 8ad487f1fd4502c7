"""End-to-end meeting processing: acquire -> summarise / extract -> assemble."""

from __future__ import annotations

import asyncio
import logging
import time
from pathlib import Path

from src.errors import ProcessingFailedError
from src.extraction.action_items import extract_action_items
from src.extraction.participants import extract_participants
from src.extraction.summarizer import summarize_text
from src.ingestion.acquisition import acquire_transcript
from src.ingestion.transcription import TranscriptionProvider
from src.pipeline_config import ProcessingOptions
from src.processing.models import ProcessingMetadata, ProcessingResult

logger = logging.getLogger(__name__)


async def process_meeting_file(
    path: str | Path,
    options: ProcessingOptions | None = None,
    provider: TranscriptionProvider | None = None,
) -> ProcessingResult:
    """Full processing pipeline for one meeting file.

    1. Acquire the transcript (transcribe audio or read ``.txt``).
    2. Summarise, extract action items and extract participants concurrently.
    3. Assemble a ProcessingResult with metadata.

    Args:
        path: Path to the uploaded meeting file.
        options: Summary options; defaults to ``ProcessingOptions()``.
        provider: Transcription provider for audio files; defaults to the one
            selected in settings.

    Returns:
        The complete ProcessingResult.

    Raises:
        ProcessingFailedError: Any stage failed. The original error is chained
            as ``__cause__``; no partial result is returned.
    """
    options = options or ProcessingOptions()
    started = time.perf_counter()

    try:
        # 1. Acquire
        transcript = await acquire_transcript(path, provider)

        # 2. Independent read-only passes over the same transcript
        summary_result, action_items_result, participants_result = await asyncio.gather(
            asyncio.to_thread(summarize_text, transcript, options),
            asyncio.to_thread(extract_action_items, transcript),
            asyncio.to_thread(extract_participants, transcript),
        )
    except Exception as exc:
        logger.exception("Meeting processing failed for %s", path)
        msg = f"Failed to process meeting file: {exc}"
        raise ProcessingFailedError(msg) from exc

    elapsed = time.perf_counter() - started
    logger.info(
        "Processed %s in %.2fs: %d action items, %d participants",
        path,
        elapsed,
        action_items_result.total_found,
        participants_result.total_found,
    )

    # 3. Assemble
    return ProcessingResult(
        transcript=transcript,
        summary=summary_result.summary,
        action_items=action_items_result.action_items,
        participants=participants_result.participants,
        metadata=ProcessingMetadata(
            original_length=len(transcript),
            summary_length=summary_result.summary_length,
            compression_ratio=summary_result.compression_ratio,
            total_action_items=action_items_result.total_found,
            total_participants=participants_result.total_found,
            processing_time=round(elapsed, 3),
            model=summary_result.model,
        ),
    )
