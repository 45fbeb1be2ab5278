"""Batch schemas."""

from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.common import Document, Patch


class BatchCreate(Document):
    academyId: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    coachId: Optional[str] = None
    coachIds: list[str] = Field(default_factory=list)
    players: list[str] = Field(default_factory=list)


class BatchUpdate(Patch):
    name: Optional[str] = None
    coachId: Optional[str] = None
    coachIds: Optional[list[str]] = None
    players: Optional[list[str]] = None


class BatchDelete(BaseModel):
    batchIds: list[str]
