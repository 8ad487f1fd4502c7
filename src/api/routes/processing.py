"""Processing endpoints: upload a meeting file and render minutes."""

from __future__ import annotations

import asyncio
import logging
import secrets
import time
from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, File, HTTPException, UploadFile

from src.api.models import MinutesRequest, MinutesResponse, ProcessMeetingResponse
from src.config import settings
from src.errors import (
    ConfigurationError,
    InvalidInputError,
    ProcessingFailedError,
    TranscriptionError,
)
from src.ingestion.acquisition import SUPPORTED_EXTENSIONS
from src.processing.minutes import generate_meeting_minutes
from src.processing.models import MeetingData
from src.processing.pipeline import process_meeting_file

logger = logging.getLogger(__name__)

router = APIRouter()


def _store_upload(raw: bytes, ext: str) -> Path:
    """Write upload bytes under ``settings.upload_dir`` with a unique name."""
    upload_dir = Path(settings.upload_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)
    unique_suffix = f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}"
    path = upload_dir / f"meeting-{unique_suffix}{ext}"
    path.write_bytes(raw)
    return path


@router.post("/api/meetings/process", response_model=ProcessMeetingResponse)
async def process_meeting(file: Annotated[UploadFile, File(...)]) -> ProcessMeetingResponse:
    """Upload a meeting file and derive summary, action items and participants.

    Accepts plain-text transcripts (.txt) and audio recordings (.wav, .mp3,
    .m4a). The file is stored for the duration of the request only.
    """
    # Enforce file size limit
    raw = await file.read()
    if len(raw) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=413,
            detail=(
                f"File too large. Maximum size is "
                f"{settings.max_upload_bytes // (1024 * 1024)} MB."
            ),
        )

    filename = file.filename or ""
    ext = Path(filename).suffix.lower()
    if ext not in SUPPORTED_EXTENSIONS:
        raise HTTPException(
            status_code=400,
            detail="Invalid file type. Only TXT, WAV, MP3 and M4A files are allowed.",
        )

    path = await asyncio.to_thread(_store_upload, raw, ext)
    try:
        result = await process_meeting_file(path)
    except ProcessingFailedError as exc:
        cause = exc.__cause__
        if isinstance(cause, ConfigurationError):
            raise HTTPException(status_code=501, detail=str(cause)) from exc
        if isinstance(cause, TranscriptionError):
            # Upstream provider problem, not the client's fault.
            raise HTTPException(status_code=503, detail=str(cause)) from exc
        if isinstance(cause, UnicodeDecodeError):
            raise HTTPException(
                status_code=400, detail="Transcript file is not valid UTF-8 text."
            ) from exc
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    finally:
        path.unlink(missing_ok=True)

    return ProcessMeetingResponse.from_result(filename, result)


@router.post("/api/meetings/minutes", response_model=MinutesResponse)
async def meeting_minutes(request: MinutesRequest) -> MinutesResponse:
    """Render a plain-text minutes document from meeting fields."""
    meeting = MeetingData(
        title=request.title,
        summary=request.summary,
        meeting_date=request.meeting_date,
        participants=request.participant_records(),
        action_items=[item.to_item() for item in request.action_items],
        duration=request.duration,
        transcript=request.transcript,
    )
    try:
        minutes = generate_meeting_minutes(meeting)
    except InvalidInputError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return MinutesResponse(minutes=minutes)
