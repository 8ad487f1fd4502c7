"""Data models for end-to-end meeting processing and minutes rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime

from src.extraction.models import ActionItem, Participant


@dataclass
class ProcessingMetadata:
    original_length: int
    summary_length: int
    compression_ratio: int
    total_action_items: int
    total_participants: int
    processing_time: float  # seconds, wall time
    model: str
    confidence: float = 0.95


@dataclass
class ProcessingResult:
    """Everything derived from one meeting file."""

    transcript: str
    summary: str
    action_items: list[ActionItem]
    participants: list[Participant]
    metadata: ProcessingMetadata


@dataclass
class MeetingData:
    """Fields rendered into a minutes document.

    ``transcript`` is carried for completeness; the minutes template does not
    print it.
    """

    title: str
    summary: str
    meeting_date: date | datetime | str
    participants: list[Participant] = field(default_factory=list)
    action_items: list[ActionItem] = field(default_factory=list)
    duration: int | None = None  # minutes
    transcript: str = ""
