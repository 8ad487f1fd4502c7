"""Data models for heuristic extraction results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ActionStatus(str, Enum):
    """Workflow status of an action item."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass
class ActionItem:
    """A task pulled out of a transcript sentence."""

    task: str
    person: str | None = None
    deadline: str | None = None
    status: ActionStatus = ActionStatus.PENDING
    priority: Priority = Priority.MEDIUM


@dataclass
class Participant:
    """A speaker found in the transcript."""

    name: str
    email: str
    role: str = "Participant"


@dataclass
class SummaryResult:
    summary: str
    original_length: int
    summary_length: int
    compression_ratio: int
    model: str


@dataclass
class ActionItemsResult:
    action_items: list[ActionItem] = field(default_factory=list)
    total_found: int = 0


@dataclass
class ParticipantsResult:
    participants: list[Participant] = field(default_factory=list)
    total_found: int = 0
