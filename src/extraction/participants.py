"""Participant extraction from ``Name:`` speaker labels."""

from __future__ import annotations

from src.extraction.models import Participant, ParticipantsResult
from src.extraction.sentences import SPEAKER_LABEL_RE, require_text

# Placeholder convention: there is no directory to look real addresses up in.
EMAIL_DOMAIN = "company.com"


def extract_participants(text: str) -> ParticipantsResult:
    """Return the unique speakers of *text* in order of first appearance.

    The whole transcript is scanned, not sentence by sentence, so labels in
    short utterances still count.

    Raises:
        InvalidInputError: If *text* is not a string.
    """
    text = require_text(text)

    names = list(dict.fromkeys(SPEAKER_LABEL_RE.findall(text)))
    participants = [
        Participant(name=name, email=f"{name.lower()}@{EMAIL_DOMAIN}") for name in names
    ]
    return ParticipantsResult(participants=participants, total_found=len(participants))
