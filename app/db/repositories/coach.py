"""
Coach repository.

Coach documents carry the ratings submitted by students along with the
running ``totalRatings`` / ``ratingSum`` counters.
"""

from typing import Any, Optional

from app.db.lookup import NATIVE_ID, STRING_ID, by_fields
from app.db.repositories.base import NOT_DELETED, DocumentRepository


class CoachRepository(DocumentRepository):
    """Repository for ``ams-coaches``."""

    collection_name = "ams-coaches"
    lookup = (NATIVE_ID, STRING_ID, *by_fields("userId"))

    def get_by_academy(self, academy_id: str) -> list[dict]:
        return self.find_by_filter({"academyId": academy_id, **NOT_DELETED}, sort=[("name", 1)])

    def add_rating(self, coach_id: Any, rating: dict) -> Optional[dict]:
        """Push a rating and bump the counters in one atomic update."""
        return self.update(coach_id, {
            "$push": {"ratings": rating},
            "$inc": {"totalRatings": 1, "ratingSum": rating["rating"]},
        })
