"""User profile details schemas."""

from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.common import Patch


class SocialLinks(BaseModel):
    twitter: str = ""
    linkedin: str = ""
    website: str = ""


class UserInfoUpsert(Patch):
    """Profile details keyed by ``(userId, academyId)``."""
    userId: str = Field(..., min_length=1)
    academyId: str = Field(..., min_length=1)
    bio: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    experience: Optional[str] = None
    photoUrl: Optional[str] = None
    socialLinks: Optional[SocialLinks] = None
    certificates: Optional[list[str]] = None
    specializations: Optional[list[str]] = None


def default_user_info(user_id: str, academy_id: Optional[str] = None) -> dict:
    """Shape returned when a user has not filled in profile details yet."""
    info = {
        "userId": user_id,
        "bio": "",
        "address": "",
        "phone": "",
        "experience": "",
        "photoUrl": "",
        "socialLinks": SocialLinks().model_dump(),
        "certificates": [],
        "specializations": [],
    }
    if academy_id:
        info["academyId"] = academy_id
    return info
