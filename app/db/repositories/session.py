"""
Training session repository.

Handles ``ams-sessions``: one-off sessions, recurring parents and the
occurrence documents generated from them (``isOccurrence`` with a
``parentSessionId``). Includes the aggregation queries used for coach
statistics.
"""

from typing import Any, Optional

from app.db.lookup import NATIVE_ID, NUMERIC_ID, STRING_ID
from app.db.repositories.base import NOT_DELETED, DocumentRepository, utcnow

PLAYER_COLLECTION = "ams-player-data"


class SessionRepository(DocumentRepository):
    """Repository for session documents."""

    collection_name = "ams-sessions"
    lookup = (NATIVE_ID, STRING_ID, NUMERIC_ID)

    def get_by_academy(self, academy_id: str) -> list[dict]:
        return self.find_by_filter({"academyId": academy_id, **NOT_DELETED}, sort=[("date", -1)])

    def get_by_coach(self, coach_id: str, academy_id: Optional[str] = None) -> list[dict]:
        query: dict[str, Any] = {"$or": [{"coachId": coach_id}, {"coachIds": coach_id}], **NOT_DELETED}
        if academy_id:
            query["academyId"] = academy_id
        return self.find_by_filter(query, sort=[("date", -1)])

    def get_finished_for_player(self, player_id: str, limit: int = 5) -> list[dict]:
        return self.find_by_filter({"assignedPlayers": player_id, "status": "Finished", **NOT_DELETED},
                                   sort=[("date", -1)], limit=limit)

    # ------------------------------------------------------------------
    # Recurring occurrences
    # ------------------------------------------------------------------

    @staticmethod
    def _parent_filter(parent_id: str, academy_id: str) -> dict:
        # parentSessionId was historically stored either as text or as a number
        candidates: list[Any] = [str(parent_id)]
        try:
            candidates.append(int(parent_id))
        except (TypeError, ValueError):
            pass
        return {"parentSessionId": {"$in": candidates}, "academyId": academy_id, "isOccurrence": True}

    def get_occurrences(self, parent_id: str, academy_id: str, status: Optional[str] = None) -> list[dict]:
        """Occurrences of a recurring session with their players joined in."""
        match = {**self._parent_filter(parent_id, academy_id), **NOT_DELETED}
        if status:
            match["status"] = status
        pipeline = [
            {"$match": match},
            {"$lookup": {"from": PLAYER_COLLECTION, "localField": "assignedPlayers", "foreignField": "id",
                         "as": "assignedPlayersData"}},
            {"$sort": {"date": 1, "startTime": 1}},
        ]
        return self.aggregate(pipeline)

    def count_occurrences(self, parent_id: str, academy_id: str) -> int:
        return self.count(self._parent_filter(parent_id, academy_id))

    def insert_occurrences(self, occurrences: list[dict]) -> list[dict]:
        return [self.insert(doc) for doc in occurrences]

    def update_occurrences(self, parent_id: str, academy_id: str, patch: dict) -> int:
        result = self.collection.update_many({**self._parent_filter(parent_id, academy_id), **NOT_DELETED},
                                             {"$set": {**patch, "updatedAt": utcnow()}})
        return result.modified_count

    # ------------------------------------------------------------------
    # Aggregation queries for coach statistics
    # ------------------------------------------------------------------

    def count_by_status_for_coach(self, coach_id: str) -> dict[str, int]:
        """Number of non-deleted sessions per status for one coach."""
        pipeline = [
            {"$match": {"$or": [{"coachId": coach_id}, {"coachIds": coach_id}], **NOT_DELETED}},
            {"$group": {"_id": "$status", "count": {"$sum": 1}}},
        ]
        return {row["_id"] or "Unknown": row["count"] for row in self.aggregate(pipeline)}

    def delete_by_academy(self, academy_id: str) -> int:
        return self.collection.delete_many({"academyId": academy_id}).deleted_count
