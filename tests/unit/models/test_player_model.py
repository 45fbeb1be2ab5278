"""Tests for player rating and history helpers.

Pure functions, no database involved.
"""

import datetime

import pytest

from app.models.player import (
    PerformanceEntry,
    PerformanceType,
    accumulate_stats,
    compute_average_performance,
    compute_overall_rating,
    latest_entries,
)


class TestOverallRating:

    def test_full_marks(self):
        attributes = dict.fromkeys(["shooting", "pace", "positioning", "passing", "ballControl", "crossing"], 10)
        assert compute_overall_rating(attributes) == 100.0

    def test_partial_and_missing(self):
        assert compute_overall_rating({"shooting": 7, "pace": 8}) == 25.0

    def test_ignores_other_attributes(self):
        assert compute_overall_rating({"goals": 40}) == 0.0

    def test_empty(self):
        assert compute_overall_rating(None) == 0.0

    def test_rounds_to_one_decimal(self):
        assert compute_overall_rating({"shooting": 1}) == 1.7


class TestAveragePerformance:

    def test_empty_history(self):
        assert compute_average_performance([]) == 0.0

    def test_uses_last_five_entries(self):
        history = [{"sessionRating": 0}] * 3 + [{"sessionRating": 9, "trainingPoints": 9, "matchPoints": 9}] * 5
        assert compute_average_performance(history) == 9.0

    def test_missing_components_count_as_zero(self):
        assert compute_average_performance([{"sessionRating": 6}]) == 2.0


class TestAccumulateStats:

    def test_adds_counters(self):
        merged = accumulate_stats({"goals": 2, "pace": 7}, {"goals": 1, "assists": 2})
        assert merged == {"goals": 3, "assists": 2, "cleanSheets": 0, "pace": 7}

    def test_does_not_mutate_input(self):
        attributes = {"goals": 1}
        accumulate_stats(attributes, {"goals": 1})
        assert attributes == {"goals": 1}

    @pytest.mark.parametrize("points, expected", [
        ({"current": 6, "edited": 8}, 8),
        ({"current": 6}, 6),
        (7.5, 7.5),
    ])
    def test_match_points(self, points, expected):
        assert accumulate_stats({}, {"matchPoints": points})["matchPoints"] == expected


class TestLatestEntries:

    def test_sorted_newest_first_with_limit(self):
        history = [
            {"n": 1, "date": datetime.datetime(2024, 1, 1)},
            {"n": 3, "date": "2024-03-01T10:00:00Z"},
            {"n": 2, "date": datetime.datetime(2024, 2, 1)},
            {"n": 0},
        ]
        assert [e["n"] for e in latest_entries(history, 2)] == [3, 2]
        assert [e["n"] for e in latest_entries(history)] == [3, 2, 1, 0]


class TestPerformanceEntry:

    def test_document_drops_empty_fields(self):
        entry = PerformanceEntry(type=PerformanceType.TRAINING, date=datetime.datetime(2024, 1, 1),
                                 sessionId="s1", sessionRating=8)
        doc = entry.to_document()
        assert doc["type"] == "training"
        assert "matchId" not in doc
        assert doc["sessionId"] == "s1"
