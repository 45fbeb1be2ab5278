"""
Coach service.

Ratings are pushed with atomic counter increments; the average is then
recomputed from the counters in a second update.
"""

from typing import Optional

from pymongo.database import Database

from app.api.responses import serialize_document
from app.core.errors import NotFoundError, ValidationError
from app.db.repositories.base import utcnow
from app.db.repositories.coach import CoachRepository
from app.db.repositories.session import SessionRepository
from app.models.session import SessionStatus
from app.schemas.coach import CoachRatingCreate, CoachUpdate


class CoachService:
    def __init__(self, db: Database):
        self.repository = CoachRepository(db)
        self.sessions = SessionRepository(db)

    def list_coaches(self, academy_id: str) -> list[dict]:
        return [serialize_document(c) for c in self.repository.get_by_academy(academy_id)]

    def get_coach(self, coach_id: str) -> dict:
        coach = self._get_or_404(coach_id)
        data = serialize_document(coach)
        data.setdefault("ratings", [])
        data.setdefault("averageRating", 0)
        return data

    def update_coach(self, coach_id: str, data: CoachUpdate) -> dict:
        changes = data.changes()
        if not changes:
            raise ValidationError("No changes provided")
        coach = self.repository.update_fields(coach_id, changes)
        if not coach:
            raise NotFoundError("Coach not found")
        return serialize_document(coach)

    def add_rating(self, data: CoachRatingCreate) -> dict:
        rating = {"studentId": data.studentId, "rating": data.rating, "date": data.date or utcnow().isoformat()}
        coach = self.repository.add_rating(data.coachId, rating)
        if coach is None:
            raise NotFoundError("Coach not found")

        average = round(coach["ratingSum"] / coach["totalRatings"], 1) if coach.get("totalRatings") else 0
        self.repository.update_fields(coach["_id"], {"averageRating": average})
        return {"averageRating": average, "totalRatings": coach["totalRatings"]}

    def get_ratings(self, coach_id: str) -> dict:
        coach = self._get_or_404(coach_id)
        ratings = sorted(coach.get("ratings") or [], key=lambda r: str(r.get("date") or ""), reverse=True)
        return {
            "coachId": str(coach.get("id") or coach["_id"]),
            "ratings": ratings,
            "averageRating": coach.get("averageRating", 0),
            "totalRatings": coach.get("totalRatings", 0),
        }

    def get_session_stats(self, coach_id: str) -> dict:
        """Session counts for a coach, grouped by status in the store."""
        coach = self.repository.find_by_id(coach_id)
        # sessions reference the coach by its user id when the coach has one
        reference = (coach or {}).get("userId") or coach_id
        by_status = self.sessions.count_by_status_for_coach(str(reference))
        return {
            "totalSessions": sum(by_status.values()),
            "finishedSessions": by_status.get(SessionStatus.FINISHED.value, 0),
            "upcomingSessions": by_status.get(SessionStatus.UPCOMING.value, 0),
            "ongoingSessions": by_status.get(SessionStatus.ONGOING.value, 0),
        }

    def _get_or_404(self, coach_id: str) -> dict:
        coach: Optional[dict] = self.repository.find_by_id(coach_id)
        if not coach or coach.get("isDeleted"):
            raise NotFoundError("Coach not found")
        return coach
