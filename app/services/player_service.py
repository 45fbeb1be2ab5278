"""
Player service.

Profile reads go through the per-process response cache. Metric and stats
updates replace or accumulate ``attributes`` and append to
``performanceHistory`` in the same single-document update.
"""

import logging
from typing import Any, Optional

from pymongo.database import Database

from app.api.responses import serialize_document
from app.core.cache import ResponseCache
from app.core.errors import NotFoundError, ValidationError
from app.db.repositories.base import utcnow
from app.db.repositories.player import PlayerRepository
from app.db.repositories.session import SessionRepository
from app.models.player import (
    PerformanceEntry,
    PerformanceType,
    RECENT_PERFORMANCE_WINDOW,
    accumulate_stats,
    compute_average_performance,
    compute_overall_rating,
    latest_entries,
)
from app.schemas.player import PlayerCreate, PlayerUpdate, SessionMetrics

logger = logging.getLogger(__name__)

# Fields under which a player may be addressed; all are cache keys
ALIAS_FIELDS = ("_id", "id", "userId", "username", "playerId")


class PlayerService:
    """Service for player business logic."""

    def __init__(self, db: Database, cache: Optional[ResponseCache] = None):
        self.repository = PlayerRepository(db)
        self.sessions = SessionRepository(db)
        self.cache = cache

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def list_players(self, academy_id: str) -> list[dict]:
        return [serialize_document(p) for p in self.repository.get_by_academy(academy_id)]

    def get_player(self, player_id: str) -> dict:
        if self.cache is not None:
            cached = self.cache.get(player_id)
            if cached is not None:
                logger.debug("Returning cached player data for %s", player_id)
                return cached

        player = self._get_or_404(player_id)
        data = serialize_document(player)
        data.setdefault("attributes", {})
        data.setdefault("performanceHistory", [])
        if self.cache is not None:
            self.cache.set(str(player.get("id") or player["_id"]), data, aliases=(player_id,))
        return data

    def get_players_batch(self, player_ids: list[str]) -> list[dict]:
        """Summaries for a list of ids, whichever id form each one uses."""
        if not player_ids:
            raise ValidationError("No player IDs provided")
        players = self.repository.get_many(player_ids)
        return [
            {
                "_id": str(p["_id"]),
                "id": p.get("id") or "",
                "name": p.get("name") or p.get("username") or "Unknown Player",
                "position": p.get("position") or "Unassigned",
                "photoUrl": p.get("photoUrl") or "/default-avatar.png",
                "academyId": p.get("academyId"),
            }
            for p in players
        ]

    def get_performance(self, player_id: str, limit: int = RECENT_PERFORMANCE_WINDOW) -> dict:
        """The ``limit`` most recent history entries plus recently finished sessions."""
        player = self._get_or_404(player_id)
        history = latest_entries(player.get("performanceHistory"), limit)
        recent_sessions = self.sessions.get_finished_for_player(str(player.get("id") or player["_id"]))
        return {
            "playerId": str(player.get("id") or player["_id"]),
            "name": player.get("name"),
            "attributes": player.get("attributes") or {},
            "overallRating": player.get("overallRating", 0),
            "averagePerformance": player.get("averagePerformance", 0),
            "performanceHistory": history,
            "recentSessions": [serialize_document(s) for s in recent_sessions],
        }

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def create_player(self, data: PlayerCreate) -> dict:
        doc = data.to_document()
        doc.setdefault("performanceHistory", [])
        doc["overallRating"] = compute_overall_rating(doc.get("attributes"))
        doc["averagePerformance"] = 0.0
        return serialize_document(self.repository.insert(doc))

    def update_player(self, player_id: str, data: PlayerUpdate) -> dict:
        """Merge profile changes and recompute the derived ratings."""
        current = self._get_or_404(player_id)
        changes = data.changes()
        if not changes:
            raise ValidationError("No changes provided")

        attributes = changes.get("attributes", current.get("attributes") or {})
        changes["overallRating"] = compute_overall_rating(attributes)
        changes["averagePerformance"] = compute_average_performance(current.get("performanceHistory"))
        changes["lastUpdated"] = utcnow()

        updated = self.repository.update_fields(current["_id"], changes)
        if updated is None:
            raise NotFoundError("Player not found")
        self._invalidate(updated)
        return serialize_document(updated)

    def record_session_metrics(self, player_id: Any, session_id: str, metrics: SessionMetrics) -> None:
        """Replace attributes with the session's values and log a training entry."""
        now = utcnow()
        entry = PerformanceEntry(type=PerformanceType.TRAINING, date=now, sessionId=session_id,
                                 attributes=metrics.attributes, sessionRating=metrics.sessionRating)
        self._append(player_id, entry, {"attributes": metrics.attributes, "lastUpdated": now})

    def record_match_stats(self, player_id: str, match_id: str, stats: dict) -> None:
        """Add the match stats onto the running counters and log a match entry."""
        current = self._get_or_404(player_id)
        now = utcnow()
        attributes = accumulate_stats(current.get("attributes"), stats)
        entry = PerformanceEntry(type=PerformanceType.MATCH, date=now, matchId=match_id, stats=stats)
        self._append(current["_id"], entry, {"attributes": attributes, "lastUpdated": now})

    def record_match_points(self, player_id: str, match_id: str, points: float,
                            previous_points: Optional[float] = None) -> None:
        now = utcnow()
        entry = PerformanceEntry(type=PerformanceType.MATCH, date=now, matchId=match_id,
                                 stats={"matchPoints": {"current": points}, "previousPoints": previous_points})
        self._append(player_id, entry, {"attributes.matchPoints": points, "lastUpdated": now})

    def delete_player(self, player_id: str) -> None:
        player = self._get_or_404(player_id)
        self.repository.soft_delete(player["_id"])
        self._invalidate(player)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_or_404(self, player_id: Any) -> dict:
        player = self.repository.find_by_id(player_id)
        if not player or player.get("isDeleted"):
            raise NotFoundError("Player not found")
        return player

    def _append(self, player_id: Any, entry: PerformanceEntry, set_fields: dict) -> None:
        player = self._get_or_404(player_id)
        if not self.repository.append_performance(player["_id"], entry.to_document(), set_fields):
            raise NotFoundError("Player not found")
        self._invalidate(player)

    def _invalidate(self, player: dict) -> None:
        if self.cache is None:
            return
        for field in ALIAS_FIELDS:
            if player.get(field) is not None:
                self.cache.invalidate(str(player[field]))
