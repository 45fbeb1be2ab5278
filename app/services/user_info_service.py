"""Profile details service."""

from typing import Optional

from pymongo.database import Database

from app.db.repositories.user_info import UserInfoRepository
from app.schemas.user_info import UserInfoUpsert, default_user_info


class UserInfoService:
    def __init__(self, db: Database):
        self.repository = UserInfoRepository(db)

    def get(self, user_id: str, academy_id: Optional[str] = None) -> dict:
        """Stored profile details, or the empty defaults when none exist."""
        return self.repository.get(user_id, academy_id) or default_user_info(user_id, academy_id)

    def upsert(self, data: UserInfoUpsert) -> dict:
        """Create or update the profile for ``(userId, academyId)``.

        ``createdAt`` is written once; list fields default to empty only on insert.
        """
        patch = data.changes()
        user_id = patch.pop("userId")
        academy_id = patch.pop("academyId")
        return self.repository.upsert_profile(user_id, academy_id, patch)
