"""Keyword and regex based action-item extraction."""

from __future__ import annotations

import logging
import re

from src.extraction.models import ActionItem, ActionItemsResult
from src.extraction.sentences import SPEAKER_LABEL_RE, require_text, split_sentences

logger = logging.getLogger(__name__)

# Matched as plain substrings of the lower-cased sentence, so "goodwill"
# counts as "will".
ACTION_KEYWORDS: tuple[str, ...] = (
    "will",
    "shall",
    "should",
    "need",
    "must",
    "ensure",
    "prepare",
    "complete",
    "finish",
    "deliver",
)

DEADLINE_RE = re.compile(r"(by|before|until)\s+([A-Za-z0-9\s,]+)", re.IGNORECASE)


def _has_action_keyword(sentence: str) -> bool:
    lowered = sentence.lower()
    return any(keyword in lowered for keyword in ACTION_KEYWORDS)


def _find_person(sentence: str) -> str | None:
    match = SPEAKER_LABEL_RE.search(sentence)
    return match.group(1) if match else None


def _find_deadline(sentence: str) -> str | None:
    match = DEADLINE_RE.search(sentence)
    return match.group(2).strip() if match else None


def extract_action_items(text: str) -> ActionItemsResult:
    """Extract action items from a transcript.

    Every sentence containing an action keyword becomes one ActionItem, in
    transcript order. The speaker label in the sentence (``Name:``) is the
    assignee and a ``by/before/until ...`` phrase is the deadline.

    Raises:
        InvalidInputError: If *text* is not a string.
    """
    text = require_text(text)

    items: list[ActionItem] = []
    for sentence in split_sentences(text):
        if not _has_action_keyword(sentence):
            continue
        items.append(
            ActionItem(
                task=sentence.strip(),
                person=_find_person(sentence),
                deadline=_find_deadline(sentence),
            )
        )

    logger.debug("Found %d action items", len(items))
    return ActionItemsResult(action_items=items, total_found=len(items))
