"""Pydantic request/response schemas for the meeting processing API."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from src.extraction.models import ActionItem, ActionStatus, Participant, Priority
from src.processing.models import ProcessingResult


class ActionItemSchema(BaseModel):
    """A single action item in API requests and responses."""

    task: str = Field(min_length=1)
    person: str | None = None
    deadline: str | None = None
    status: ActionStatus = ActionStatus.PENDING
    priority: Priority = Priority.MEDIUM

    @classmethod
    def from_item(cls, item: ActionItem) -> ActionItemSchema:
        return cls(
            task=item.task,
            person=item.person,
            deadline=item.deadline,
            status=item.status,
            priority=item.priority,
        )

    def to_item(self) -> ActionItem:
        return ActionItem(
            task=self.task,
            person=self.person,
            deadline=self.deadline,
            status=self.status,
            priority=self.priority,
        )


class ParticipantSchema(BaseModel):
    name: str = Field(min_length=1)
    email: str = ""
    role: str = "Participant"


class ProcessingMetadataSchema(BaseModel):
    original_length: int
    summary_length: int
    compression_ratio: int
    total_action_items: int
    total_participants: int
    processing_time: float
    model: str
    confidence: float


class ProcessMeetingResponse(BaseModel):
    """Response body for the /api/meetings/process endpoint."""

    filename: str
    transcript: str
    summary: str
    action_items: list[ActionItemSchema] = []
    participants: list[ParticipantSchema] = []
    metadata: ProcessingMetadataSchema

    @classmethod
    def from_result(cls, filename: str, result: ProcessingResult) -> ProcessMeetingResponse:
        m = result.metadata
        return cls(
            filename=filename,
            transcript=result.transcript,
            summary=result.summary,
            action_items=[ActionItemSchema.from_item(i) for i in result.action_items],
            participants=[
                ParticipantSchema(name=p.name, email=p.email, role=p.role)
                for p in result.participants
            ],
            metadata=ProcessingMetadataSchema(
                original_length=m.original_length,
                summary_length=m.summary_length,
                compression_ratio=m.compression_ratio,
                total_action_items=m.total_action_items,
                total_participants=m.total_participants,
                processing_time=m.processing_time,
                model=m.model,
                confidence=m.confidence,
            ),
        )


class MinutesRequest(BaseModel):
    """Request body for the /api/meetings/minutes endpoint."""

    title: str = Field(min_length=1, max_length=200)
    meeting_date: date
    duration: int | None = Field(default=None, ge=0)
    transcript: str = ""
    summary: str = ""
    action_items: list[ActionItemSchema] = []
    participants: list[ParticipantSchema] = []

    def participant_records(self) -> list[Participant]:
        return [Participant(name=p.name, email=p.email, role=p.role) for p in self.participants]


class MinutesResponse(BaseModel):
    minutes: str
