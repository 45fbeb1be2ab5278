"""
Training session domain model.

Session lifecycle: Upcoming -> On-going -> Finished. Recurring sessions
expand into occurrence documents that point back to the parent through
``parentSessionId``.
"""

import datetime
from enum import Enum
from typing import Any, Optional


class SessionStatus(str, Enum):
    UPCOMING = "Upcoming"
    ONGOING = "On-going"
    FINISHED = "Finished"


class AttendanceStatus(str, Enum):
    PRESENT = "Present"
    ABSENT = "Absent"


WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")

# Parent fields copied onto each generated occurrence
INHERITED_FIELDS = ("name", "academyId", "coachId", "coachIds", "coachNames", "assignedPlayers", "batchId",
                    "startTime", "endTime", "location", "type", "description")

# Parent fields exposed on an occurrence read
PARENT_SUMMARY_FIELDS = ("name", "coachId", "coachNames", "recurringEndDate", "selectedDays", "totalOccurrences")


def attendance_mark(present: bool, now: datetime.datetime) -> dict:
    status = AttendanceStatus.PRESENT if present else AttendanceStatus.ABSENT
    return {"status": status.value, "updatedAt": now}


def parse_date(value: Any) -> Optional[datetime.date]:
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, str) and value:
        try:
            return datetime.date.fromisoformat(value[:10])
        except ValueError:
            return None
    return None


def _weekday_numbers(selected_days: list[Any]) -> set[int]:
    numbers = set()
    for day in selected_days or []:
        if isinstance(day, int) and 0 <= day <= 6:
            numbers.add(day)
        elif isinstance(day, str) and day.strip().lower() in WEEKDAYS:
            numbers.add(WEEKDAYS.index(day.strip().lower()))
    return numbers


def occurrence_dates(start: datetime.date, end: datetime.date, selected_days: list[Any]) -> list[datetime.date]:
    """Every date in ``[start, end]`` falling on one of the selected weekdays.

    With no selected days the start date's weekday is used.
    """
    if end < start:
        return []
    weekdays = _weekday_numbers(selected_days) or {start.weekday()}
    dates = []
    current = start
    while current <= end:
        if current.weekday() in weekdays:
            dates.append(current)
        current += datetime.timedelta(days=1)
    return dates


def expand_occurrences(parent: dict) -> list[dict]:
    """Build the occurrence documents for a recurring parent session."""
    start = parse_date(parent.get("date"))
    end = parse_date(parent.get("recurringEndDate"))
    if start is None or end is None:
        return []

    parent_id = str(parent.get("id") or parent["_id"])
    base = {field: parent[field] for field in INHERITED_FIELDS if field in parent}
    return [
        {
            **base,
            "date": day.isoformat(),
            "parentSessionId": parent_id,
            "isOccurrence": True,
            "status": SessionStatus.UPCOMING.value,
            "attendance": {},
            "playerMetrics": {},
        }
        for day in occurrence_dates(start, end, parent.get("selectedDays", []))
    ]


def recurrence_span_days(session: dict) -> Optional[int]:
    """Days between the first date and ``recurringEndDate``, or None if either is missing."""
    start = parse_date(session.get("date"))
    end = parse_date(session.get("recurringEndDate"))
    if start is None or end is None:
        return None
    return (end - start).days


def session_duration(start_time: Any, end_time: Any) -> str:
    """Length between two same-day ``HH:MM`` times as ``"1h 30m"`` or ``"45m"``.

    Empty when either time is missing or malformed, or the end is not after the start.
    """
    try:
        start_hour, start_minute = (int(part) for part in start_time.split(":")[:2])
        end_hour, end_minute = (int(part) for part in end_time.split(":")[:2])
    except (AttributeError, ValueError):
        return ""
    minutes = (end_hour * 60 + end_minute) - (start_hour * 60 + start_minute)
    if minutes <= 0:
        return ""
    hours, minutes = divmod(minutes, 60)
    return f"{hours}h {minutes}m" if hours else f"{minutes}m"


class SessionAction(str, Enum):
    """Academy-wide actions on sessions."""

    CLEAR = "clear"
