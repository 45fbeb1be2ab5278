"""Tests for recurring session expansion and attendance marks."""

import datetime

from app.models.session import (
    attendance_mark,
    expand_occurrences,
    occurrence_dates,
    parse_date,
    recurrence_span_days,
    session_duration,
)


class TestOccurrenceDates:

    def test_selected_weekdays(self):
        # 2024-01-01 is a Monday
        dates = occurrence_dates(datetime.date(2024, 1, 1), datetime.date(2024, 1, 14), ["monday", "Thursday"])
        assert [d.isoformat() for d in dates] == ["2024-01-01", "2024-01-04", "2024-01-08", "2024-01-11"]

    def test_numeric_weekdays(self):
        dates = occurrence_dates(datetime.date(2024, 1, 1), datetime.date(2024, 1, 7), [2])
        assert dates == [datetime.date(2024, 1, 3)]

    def test_defaults_to_start_weekday(self):
        dates = occurrence_dates(datetime.date(2024, 1, 2), datetime.date(2024, 1, 16), [])
        assert len(dates) == 3

    def test_end_before_start(self):
        assert occurrence_dates(datetime.date(2024, 2, 1), datetime.date(2024, 1, 1), ["monday"]) == []


class TestExpandOccurrences:

    def test_children_point_to_parent(self):
        parent = {
            "_id": "x", "id": "parent-1", "name": "Shooting", "academyId": "a1", "date": "2024-01-01",
            "recurringEndDate": "2024-01-15", "selectedDays": ["monday"], "status": "Finished",
            "assignedPlayers": ["p1"],
        }
        children = expand_occurrences(parent)
        assert [c["date"] for c in children] == ["2024-01-01", "2024-01-08", "2024-01-15"]
        for child in children:
            assert child["parentSessionId"] == "parent-1"
            assert child["isOccurrence"] is True
            assert child["status"] == "Upcoming"
            assert child["assignedPlayers"] == ["p1"]
            assert "recurringEndDate" not in child

    def test_not_recurring(self):
        assert expand_occurrences({"_id": "x", "date": "2024-01-01"}) == []


class TestHelpers:

    def test_parse_date(self):
        assert parse_date("2024-05-06T10:00:00Z") == datetime.date(2024, 5, 6)
        assert parse_date("soon") is None
        assert parse_date(None) is None

    def test_attendance_mark(self):
        now = datetime.datetime(2024, 1, 1)
        assert attendance_mark(True, now) == {"status": "Present", "updatedAt": now}
        assert attendance_mark(False, now)["status"] == "Absent"

    def test_recurrence_span(self):
        assert recurrence_span_days({"date": "2024-01-01", "recurringEndDate": "2024-12-31"}) == 365
        assert recurrence_span_days({"date": "2024-01-01"}) is None


class TestSessionDuration:

    def test_hours_and_minutes(self):
        assert session_duration("17:00", "18:30") == "1h 30m"
        assert session_duration("17:00", "19:00") == "2h 0m"

    def test_minutes_only(self):
        assert session_duration("09:15", "10:00") == "45m"

    def test_missing_or_malformed(self):
        assert session_duration(None, "10:00") == ""
        assert session_duration("soon", "10:00") == ""
        assert session_duration("10:00", "09:00") == ""
