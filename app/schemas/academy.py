"""Academy schemas."""

from typing import Optional

from pydantic import Field

from app.schemas.common import Document


class AcademyCreate(Document):
    name: str = Field(..., min_length=1)
    location: Optional[str] = None
    contactEmail: Optional[str] = None
