"""Sentence splitting shared by the summariser and the action-item extractor."""

from __future__ import annotations

import re

from src.errors import InvalidInputError

# Runs of terminal punctuation count as a single boundary.
SENTENCE_BOUNDARY_RE = re.compile(r"[.!?]+")

# Sentences this short or shorter (after trimming) carry no content.
MIN_SENTENCE_LENGTH = 10

# A capitalised word followed by a colon, e.g. "Alice:".
SPEAKER_LABEL_RE = re.compile(r"([A-Z][a-z]+):")


def require_text(text: object) -> str:
    """Return *text* unchanged, or raise InvalidInputError if it is not a string."""
    if not isinstance(text, str):
        msg = f"Expected transcript text, got {type(text).__name__}"
        raise InvalidInputError(msg)
    return text


def split_sentences(text: str) -> list[str]:
    """Split *text* into sentences, dropping those of 10 characters or fewer.

    Returned sentences are untrimmed and in transcript order.
    """
    return [
        sentence
        for sentence in SENTENCE_BOUNDARY_RE.split(text)
        if len(sentence.strip()) > MIN_SENTENCE_LENGTH
    ]
