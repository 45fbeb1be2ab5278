"""Daily attendance record schemas."""

from pydantic import BaseModel, Field


class AttendanceRecordUpsert(BaseModel):
    """One user's attendance for a date, keyed by ``(academyId, userId, date, type)``."""
    academyId: str = Field(..., min_length=1)
    userId: str = Field(..., min_length=1)
    date: str = Field(..., min_length=1, description="ISO date")
    type: str = Field(..., min_length=1, description="e.g. player or coach")
    status: str = Field(..., min_length=1)
    markedBy: str = Field(..., min_length=1)
