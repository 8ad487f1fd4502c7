"""Turn an uploaded meeting file into transcript text."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from src.config import settings
from src.errors import UnsupportedFileTypeError
from src.ingestion.models import FileKind
from src.ingestion.transcription import TranscriptionProvider, get_transcription_provider

logger = logging.getLogger(__name__)

# Extensions treated as audio and routed to the transcription provider
AUDIO_EXTENSIONS = frozenset({".wav", ".mp3", ".m4a"})

# Extensions read directly as a UTF-8 transcript
TEXT_EXTENSIONS = frozenset({".txt"})

SUPPORTED_EXTENSIONS = AUDIO_EXTENSIONS | TEXT_EXTENSIONS


def detect_file_kind(path: str | Path) -> FileKind:
    """Classify *path* by its (case-insensitive) extension.

    Raises:
        UnsupportedFileTypeError: The extension is neither audio nor ``.txt``.
    """
    ext = Path(path).suffix.lower()
    if ext in AUDIO_EXTENSIONS:
        return FileKind.AUDIO
    if ext in TEXT_EXTENSIONS:
        return FileKind.TEXT
    raise UnsupportedFileTypeError(ext)


def _read_text(path: Path) -> str:
    # newline="" keeps line endings exactly as uploaded.
    with path.open(encoding="utf-8", newline="") as fh:
        return fh.read()


async def acquire_transcript(
    path: str | Path,
    provider: TranscriptionProvider | None = None,
) -> str:
    """Return the transcript for the meeting file at *path*.

    Audio files go through *provider* (the configured provider when omitted);
    text files are read whole as UTF-8 without any normalisation.

    Raises:
        UnsupportedFileTypeError: Unknown extension; nothing is read.
    """
    kind = detect_file_kind(path)

    if kind is FileKind.AUDIO:
        if provider is None:
            provider = get_transcription_provider(settings)
        result = await provider.transcribe(path)
        return result.text

    logger.debug("Reading text transcript from %s", path)
    return await asyncio.to_thread(_read_text, Path(path))
