"""
User profile details repository.

Profile details live in their own collection keyed by ``(userId, academyId)``.
"""

from typing import Optional

from app.db.repositories.base import DocumentRepository

PROFILE_DEFAULTS = {
    "certificates": [],
    "specializations": [],
}


class UserInfoRepository(DocumentRepository):
    """Repository for ``ams-users-info``."""

    collection_name = "ams-users-info"

    def get(self, user_id: str, academy_id: Optional[str] = None) -> Optional[dict]:
        query = {"userId": user_id}
        if academy_id:
            query["academyId"] = academy_id
        return self.collection.find_one(query)

    def upsert_profile(self, user_id: str, academy_id: str, patch: dict) -> dict:
        return self.upsert({"userId": user_id, "academyId": academy_id}, patch, defaults=PROFILE_DEFAULTS)
