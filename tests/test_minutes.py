"""Tests for plain-text minutes rendering."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from src.errors import InvalidInputError
from src.extraction.models import ActionItem, ActionStatus, Participant, Priority
from src.processing.minutes import generate_meeting_minutes
from src.processing.models import MeetingData

GENERATED_AT = datetime(2026, 3, 7, 16, 5, 9)


def _meeting(**overrides: object) -> MeetingData:
    fields: dict[str, object] = {
        "title": "Sprint Review",
        "summary": "We reviewed the sprint.",
        "meeting_date": date(2026, 3, 7),
        "participants": [
            Participant(name="Alice", email="alice@company.com"),
            Participant(name="Bob", email=""),
        ],
        "action_items": [
            ActionItem(
                task="Bob: I will deliver the report by Friday",
                person="Bob",
                deadline="Friday",
            ),
            ActionItem(
                task="Alice: We should update the docs",
                status=ActionStatus.IN_PROGRESS,
                priority=Priority.HIGH,
            ),
        ],
        "duration": 45,
    }
    fields.update(overrides)
    return MeetingData(**fields)  # type: ignore[arg-type]


class TestGenerateMeetingMinutes:
    def test_full_document(self) -> None:
        minutes = generate_meeting_minutes(_meeting(), generated_at=GENERATED_AT)

        expected = "\n".join(
            [
                "MEETING MINUTES",
                "================",
                "",
                "Title: Sprint Review",
                "Date: 3/7/2026",
                "Duration: 45 minutes",
                "",
                "PARTICIPANTS:",
                "- Alice (alice@company.com)",
                "- Bob",
                "",
                "SUMMARY:",
                "We reviewed the sprint.",
                "",
                "ACTION ITEMS:",
                "1. Bob: I will deliver the report by Friday",
                "   Assigned to: Bob",
                "   Deadline: Friday",
                "   Status: pending",
                "   Priority: medium",
                "",
                "2. Alice: We should update the docs",
                "   Status: in_progress",
                "   Priority: high",
                "",
                "",
                "Generated on: 3/7/2026, 4:05:09 PM",
                "Generated by: AMMG (Automated Meeting Minutes Generator)",
            ]
        )
        assert minutes == expected + "\n"

    def test_no_action_items_omits_section(self) -> None:
        minutes = generate_meeting_minutes(_meeting(action_items=[]), generated_at=GENERATED_AT)

        assert "ACTION ITEMS" not in minutes
        assert "We reviewed the sprint.\n\n\nGenerated on:" in minutes

    def test_missing_duration(self) -> None:
        minutes = generate_meeting_minutes(_meeting(duration=None), generated_at=GENERATED_AT)
        assert "Duration: N/A minutes" in minutes

    @pytest.mark.parametrize(
        "meeting_date",
        [date(2026, 11, 2), datetime(2026, 11, 2, 9, 30), "2026-11-02", "2026-11-02T09:30:00"],
    )
    def test_date_formats(self, meeting_date: object) -> None:
        minutes = generate_meeting_minutes(
            _meeting(meeting_date=meeting_date), generated_at=GENERATED_AT
        )
        assert "Date: 11/2/2026" in minutes

    def test_invalid_date_raises(self) -> None:
        with pytest.raises(InvalidInputError):
            generate_meeting_minutes(_meeting(meeting_date="next week"))

    def test_missing_participants_raises(self) -> None:
        with pytest.raises(InvalidInputError):
            generate_meeting_minutes(_meeting(participants=None))

    def test_missing_summary_raises(self) -> None:
        with pytest.raises(InvalidInputError, match="summary"):
            generate_meeting_minutes(_meeting(summary=None), generated_at=GENERATED_AT)

    def test_midnight_and_noon_timestamps(self) -> None:
        midnight = generate_meeting_minutes(_meeting(), generated_at=datetime(2026, 1, 1, 0, 0, 1))
        noon = generate_meeting_minutes(_meeting(), generated_at=datetime(2026, 1, 1, 12, 0, 1))
        assert "Generated on: 1/1/2026, 12:00:01 AM" in midnight
        assert "Generated on: 1/1/2026, 12:00:01 PM" in noon

    def test_meridiem_does_not_depend_on_locale(self) -> None:
        """AM/PM is computed from the hour, not from strftime's %p."""

        class GermanDatetime(datetime):
            def strftime(self, fmt: str) -> str:
                return super().strftime(fmt.replace("%p", ""))

            def __format__(self, fmt: str) -> str:
                return self.strftime(fmt)

        minutes = generate_meeting_minutes(
            _meeting(), generated_at=GermanDatetime(2026, 1, 1, 23, 59, 59)
        )

        assert "Generated on: 1/1/2026, 11:59:59 PM" in minutes

    def test_deterministic_apart_from_timestamp(self) -> None:
        first = generate_meeting_minutes(_meeting())
        second = generate_meeting_minutes(_meeting())

        def strip_timestamp(text: str) -> list[str]:
            return [ln for ln in text.splitlines() if not ln.startswith("Generated on:")]

        assert strip_timestamp(first) == strip_timestamp(second)
