"""Extractive summarisation: the first few qualifying sentences of a transcript."""

from __future__ import annotations

import math

from src.config import settings
from src.extraction.models import SummaryResult
from src.extraction.sentences import require_text, split_sentences
from src.pipeline_config import ProcessingOptions

SUMMARY_SENTENCE_COUNT = 3


def _compression_ratio(original_length: int, summary_length: int) -> int:
    """Percentage saved by the summary, rounded half up; 0 for empty input."""
    if original_length == 0:
        return 0
    return math.floor((1 - summary_length / original_length) * 100 + 0.5)


def summarize_text(text: str, options: ProcessingOptions | None = None) -> SummaryResult:
    """Build an extractive summary of *text*.

    Takes the first three sentences longer than 10 characters, in their
    original order and untrimmed, and joins them with ``". "`` plus a closing
    period.

    Args:
        text: The raw meeting transcript.
        options: Length bounds reserved for a model-backed summariser; the
            extractive logic does not use them.

    Returns:
        A SummaryResult with lengths and compression ratio.

    Raises:
        InvalidInputError: If *text* is not a string.
    """
    text = require_text(text)

    # Pieces keep their leading whitespace, so joins read ".  Next".
    sentences = split_sentences(text)[:SUMMARY_SENTENCE_COUNT]
    summary = ". ".join(sentences) + "."

    return SummaryResult(
        summary=summary,
        original_length=len(text),
        summary_length=len(summary),
        compression_ratio=_compression_ratio(len(text), len(summary)),
        model=settings.summarizer_model,
    )
