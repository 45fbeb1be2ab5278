"""Coach schemas."""

from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.common import Patch


class CoachRatingCreate(BaseModel):
    """A rating submitted by a student."""
    coachId: str = Field(..., min_length=1)
    studentId: str = Field(..., min_length=1)
    rating: float = Field(..., gt=0, le=5)
    date: Optional[str] = None


class CoachUpdate(Patch):
    name: Optional[str] = None
    specialization: Optional[str] = None
    experience: Optional[str] = None
    photoUrl: Optional[str] = None
