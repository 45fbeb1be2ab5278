"""
Player domain model.

A player document holds a numeric ``attributes`` record and an append-only
``performanceHistory``. Counters such as goals are accumulated, never
overwritten; ``attributes`` as a whole is replaced only by explicit metric
updates.
"""

import datetime
from enum import Enum
from typing import Any, Iterable, Optional

from pydantic import BaseModel, Field

# Attributes rated 0-10 that make up the overall rating
RATED_ATTRIBUTES = ("shooting", "pace", "positioning", "passing", "ballControl", "crossing")

# Counters accumulated from match stats
ACCUMULATED_STATS = ("goals", "assists", "cleanSheets")

RECENT_PERFORMANCE_WINDOW = 5


class PerformanceType(str, Enum):
    MATCH = "match"
    TRAINING = "training"


class PerformanceEntry(BaseModel):
    """One dated entry of ``performanceHistory``."""

    type: PerformanceType
    date: datetime.datetime
    sessionId: Optional[str] = None
    matchId: Optional[str] = None
    attributes: Optional[dict[str, Any]] = None
    sessionRating: Optional[float] = None
    stats: Optional[dict[str, Any]] = None

    def to_document(self) -> dict:
        return self.model_dump(mode="python", exclude_none=True) | {"type": self.type.value}


def _number(value: Any) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


def compute_overall_rating(attributes: Optional[dict]) -> float:
    """Sum of the six rated attributes as a percentage of 60, one decimal."""
    attributes = attributes or {}
    total = sum(_number(attributes.get(name)) for name in RATED_ATTRIBUTES)
    return round(total / 60 * 100, 1)


def compute_average_performance(history: Optional[list[dict]]) -> float:
    """Mean of (sessionRating + trainingPoints + matchPoints) / 3 over the last five entries."""
    recent = (history or [])[-RECENT_PERFORMANCE_WINDOW:]
    if not recent:
        return 0.0
    per_entry = [
        (_number(e.get("sessionRating")) + _number(e.get("trainingPoints")) + _number(e.get("matchPoints"))) / 3
        for e in recent
    ]
    return round(sum(per_entry) / len(per_entry), 1)


def accumulate_stats(attributes: Optional[dict], stats: dict) -> dict:
    """Return new attributes with match stats added onto the running counters."""
    merged = dict(attributes or {})
    for name in ACCUMULATED_STATS:
        merged[name] = _number(merged.get(name)) + _number(stats.get(name))
        if float(merged[name]).is_integer():
            merged[name] = int(merged[name])
    match_points = stats.get("matchPoints")
    if isinstance(match_points, dict):
        merged["matchPoints"] = match_points.get("edited") or match_points.get("current") or 0
    elif match_points is not None:
        merged["matchPoints"] = match_points
    return merged


def _entry_date(entry: dict) -> datetime.datetime:
    value = entry.get("date")
    if isinstance(value, datetime.datetime):
        return value.replace(tzinfo=None)
    if isinstance(value, str):
        try:
            return datetime.datetime.fromisoformat(value.replace("Z", "+00:00")).replace(tzinfo=None)
        except ValueError:
            pass
    return datetime.datetime.min


def latest_entries(history: Optional[Iterable[dict]], limit: Optional[int] = None) -> list[dict]:
    """History entries sorted by ``date`` descending, optionally the first ``limit``."""
    ordered = sorted(history or [], key=_entry_date, reverse=True)
    return ordered[:limit] if limit else ordered
