"""Plain-text meeting minutes rendering."""

from __future__ import annotations

from datetime import date, datetime

from src.errors import InvalidInputError
from src.extraction.models import ActionItem
from src.processing.models import MeetingData

GENERATOR_SIGNATURE = "AMMG (Automated Meeting Minutes Generator)"


def _parse_meeting_date(value: date | datetime | str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.fromisoformat(value).date()
    except (TypeError, ValueError) as exc:
        msg = f"Invalid meeting date: {value!r}"
        raise InvalidInputError(msg) from exc


def _format_date(d: date) -> str:
    """US short date without zero padding, e.g. ``3/7/2026``."""
    return f"{d.month}/{d.day}/{d.year}"


def _format_timestamp(ts: datetime) -> str:
    """US date and 12-hour time, e.g. ``3/7/2026, 4:05:09 PM``."""
    hour = ts.hour % 12 or 12
    meridiem = "AM" if ts.hour < 12 else "PM"
    return f"{_format_date(ts.date())}, {hour}:{ts:%M:%S} {meridiem}"


def _action_item_lines(index: int, item: ActionItem) -> list[str]:
    lines = [f"{index}. {item.task}"]
    if item.person:
        lines.append(f"   Assigned to: {item.person}")
    if item.deadline:
        lines.append(f"   Deadline: {item.deadline}")
    lines.append(f"   Status: {item.status.value}")
    lines.append(f"   Priority: {item.priority.value}")
    lines.append("")
    return lines


def generate_meeting_minutes(meeting: MeetingData, generated_at: datetime | None = None) -> str:
    """Render *meeting* as a plain-text minutes document.

    Sections, in order: header (title, date, duration), PARTICIPANTS, SUMMARY
    and ACTION ITEMS. The ACTION ITEMS section is left out entirely when there
    are none. The closing "Generated on" line uses *generated_at*, or the
    current local time, and is the only part that varies between calls with
    the same input.

    Raises:
        InvalidInputError: The meeting date cannot be parsed, or the summary
            or a list field is missing.
    """
    if meeting.participants is None or meeting.action_items is None:
        msg = "Meeting data must include participants and action_items lists"
        raise InvalidInputError(msg)
    if not isinstance(meeting.summary, str):
        msg = "Meeting data must include a summary string"
        raise InvalidInputError(msg)

    meeting_date = _parse_meeting_date(meeting.meeting_date)
    generated_at = generated_at or datetime.now()

    lines = [
        "MEETING MINUTES",
        "================",
        "",
        f"Title: {meeting.title}",
        f"Date: {_format_date(meeting_date)}",
        f"Duration: {meeting.duration or 'N/A'} minutes",
        "",
        "PARTICIPANTS:",
    ]
    for participant in meeting.participants:
        suffix = f" ({participant.email})" if participant.email else ""
        lines.append(f"- {participant.name}{suffix}")
    lines.extend(["", "SUMMARY:", meeting.summary, ""])

    if meeting.action_items:
        lines.append("ACTION ITEMS:")
        for i, item in enumerate(meeting.action_items, 1):
            lines.extend(_action_item_lines(i, item))

    lines.extend(
        [
            "",
            f"Generated on: {_format_timestamp(generated_at)}",
            f"Generated by: {GENERATOR_SIGNATURE}",
        ]
    )
    return "\n".join(lines) + "\n"
