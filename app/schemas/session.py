"""
Training session API schemas.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from app.models.session import SessionAction, SessionStatus
from app.schemas.common import Document, Patch
from app.schemas.player import SessionMetrics


class SessionCreate(Document):
    """Schema for creating a session (one-off or recurring parent)."""
    academyId: str = Field(..., min_length=1)
    name: Optional[str] = None
    date: Optional[str] = Field(None, description="ISO date of the session (or first occurrence)")
    startTime: Optional[str] = None
    endTime: Optional[str] = None
    status: SessionStatus = SessionStatus.UPCOMING
    coachId: Optional[str] = None
    coachIds: list[str] = Field(default_factory=list)
    assignedPlayers: list[str] = Field(default_factory=list)
    isRecurring: bool = False
    recurringEndDate: Optional[str] = None
    selectedDays: list[Any] = Field(default_factory=list)


class SessionUpdate(Patch):
    """Schema for updating a session; omitted fields are left untouched."""
    name: Optional[str] = None
    date: Optional[str] = None
    startTime: Optional[str] = None
    endTime: Optional[str] = None
    status: Optional[SessionStatus] = None
    coachId: Optional[str] = None
    coachIds: Optional[list[str]] = None
    coachNames: Optional[list[str]] = None
    assignedPlayers: Optional[list[str]] = None
    location: Optional[str] = None
    description: Optional[str] = None
    playerRatings: Optional[dict[str, Any]] = None


class OccurrenceUpdate(SessionUpdate):
    academyId: str = Field(..., min_length=1)


class SessionBulkDelete(BaseModel):
    sessionIds: list[str] = Field(..., min_length=1)
    academyId: str = Field(..., min_length=1)


class AttendanceUpdate(BaseModel):
    playerId: str = Field(..., min_length=1)
    status: bool


class SessionMetricsUpdate(BaseModel):
    playerId: str = Field(..., min_length=1)
    metrics: SessionMetrics


class SessionActionRequest(BaseModel):
    action: SessionAction
    academyId: str = Field(..., min_length=1)
