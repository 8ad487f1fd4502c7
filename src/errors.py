"""Domain errors raised by the meeting processing core."""

from __future__ import annotations


class MeetingProcessingError(Exception):
    """Base class for all meeting processing errors."""


class UnsupportedFileTypeError(MeetingProcessingError):
    """The uploaded file's extension is neither audio nor plain text."""

    def __init__(self, extension: str) -> None:
        self.extension = extension
        super().__init__(f"Unsupported file type: {extension or '(none)'!r}")


class InvalidInputError(MeetingProcessingError):
    """A stage received a missing or non-text transcript."""


class TranscriptionError(MeetingProcessingError):
    """The speech-to-text provider failed or rejected the audio."""


class ConfigurationError(MeetingProcessingError):
    """The configured provider cannot be built from the current settings."""


class ProcessingFailedError(MeetingProcessingError):
    """A stage of ``process_meeting_file`` failed.

    The underlying error is available as ``__cause__``.
    """
