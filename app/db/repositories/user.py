"""
User repository.

Handles database operations for academy users (admins, coaches, players,
coordinators) and the owner account.
"""

from typing import Optional

from app.db.lookup import NATIVE_ID, STRING_ID, by_fields
from app.db.repositories.base import NOT_DELETED, DocumentRepository


class UserRepository(DocumentRepository):
    """Repository for ``ams-users``."""

    collection_name = "ams-users"
    lookup = (NATIVE_ID, STRING_ID, *by_fields("username"))

    def get_by_username(self, username: str) -> Optional[dict]:
        """
        Get an active user by username.

        Args:
            username: Login name

        Returns:
            User document if found, None otherwise
        """
        return self.collection.find_one({"username": username, **NOT_DELETED})

    def exists_by_username(self, username: str) -> bool:
        return self.get_by_username(username) is not None

    def get_by_academy(self, academy_id: str, role: Optional[str] = None) -> list[dict]:
        query = {"academyId": academy_id, **NOT_DELETED}
        if role:
            query["role"] = role
        return self.find_by_filter(query, sort=[("name", 1)])

    def get_coaches_by_ids(self, coach_ids: list[str]) -> list[dict]:
        """Coaches matching any of the ids, by native or string id."""
        if not coach_ids:
            return []
        return self.find_by_ids(coach_ids, {"role": "coach"})


class OwnerRepository(DocumentRepository):
    """Repository for the single ``ams-owner`` account."""

    collection_name = "ams-owner"
    lookup = by_fields("username")

    def get_by_username(self, username: str) -> Optional[dict]:
        return self.collection.find_one({"username": username})
