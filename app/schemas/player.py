"""
Player API schemas.

``attributes`` is replaced wholesale wherever it appears; every other
update merges field by field.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from app.schemas.common import Document, Patch


class PlayerCreate(Document):
    name: str = Field(..., min_length=1)
    academyId: str = Field(..., min_length=1)
    userId: Optional[str] = None
    username: Optional[str] = None
    position: Optional[str] = None
    photoUrl: Optional[str] = None
    attributes: dict[str, Any] = Field(default_factory=dict)


class PlayerUpdate(Patch):
    name: Optional[str] = None
    position: Optional[str] = None
    age: Optional[int] = Field(None, ge=0)
    photoUrl: Optional[str] = None
    batchId: Optional[str] = None
    attributes: Optional[dict[str, Any]] = None


class SessionMetrics(Document):
    """Per-player metrics recorded for one session."""
    attributes: dict[str, Any] = Field(default_factory=dict)
    sessionRating: Optional[float] = Field(None, ge=0, le=10)


class PlayerMetricsUpdate(BaseModel):
    sessionId: str = Field(..., min_length=1)
    metrics: SessionMetrics


class PlayerStatsUpdate(BaseModel):
    matchId: str = Field(..., min_length=1)
    stats: dict[str, Any]


class MatchPointsUpdate(BaseModel):
    matchId: str = Field(..., min_length=1)
    points: float
    previousPoints: Optional[float] = None
