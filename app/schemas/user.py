"""
User API schemas.

Pydantic models for user-related request/response validation.
"""

from typing import Optional

from pydantic import BaseModel, Field

from app.models.user import Role
from app.schemas.common import Document, Patch


class UserCreate(Document):
    """Schema for provisioning a user inside an academy."""
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=6, description="Password (min 6 characters)")
    name: Optional[str] = None
    email: Optional[str] = None
    role: Role = Role.PLAYER
    academyId: str = Field(..., min_length=1)


class UserUpdate(Patch):
    """Schema for updating a user profile."""
    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[Role] = None
    password: Optional[str] = Field(None, min_length=6)
    photoUrl: Optional[str] = None
    phone: Optional[str] = None
    settings: Optional[dict] = None


class LoginRequest(BaseModel):
    """Schema for user login."""
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class Token(BaseModel):
    """Schema for JWT token response."""
    access_token: str
    token_type: str = "bearer"
