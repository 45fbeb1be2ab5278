"""
Training session service.

Handles one-off and recurring sessions, attendance and per-player metrics.
Recording metrics touches two collections (player, then session) without a
transaction: if the second write fails the player update stays in place.
"""

import logging
from typing import Any, Optional

from pymongo.database import Database

from app.api.responses import serialize_document
from app.core.cache import ResponseCache
from app.core.config import settings
from app.core.errors import ConflictError, NotFoundError, ValidationError, require
from app.db.repositories.base import utcnow
from app.db.repositories.session import SessionRepository
from app.models.session import PARENT_SUMMARY_FIELDS, attendance_mark, expand_occurrences, recurrence_span_days
from app.schemas.player import SessionMetrics
from app.schemas.session import OccurrenceUpdate, SessionCreate, SessionUpdate
from app.services.player_service import PlayerService

logger = logging.getLogger(__name__)


def _player_key(player_id: str) -> str:
    # player ids become part of a dotted update path
    if "." in player_id or player_id.startswith("$"):
        raise ValidationError("Invalid playerId")
    return player_id


def _session_key(session: dict) -> str:
    return str(session.get("id") or session["_id"])


def _check_recurrence_span(session: dict) -> None:
    span = recurrence_span_days(session)
    if span is not None and span > settings.MAX_RECURRENCE_DAYS:
        raise ValidationError(f"recurringEndDate must be within {settings.MAX_RECURRENCE_DAYS} days of date")


def _player_summary(player: dict) -> dict:
    return {
        "id": str(player.get("id") or player.get("_id")),
        "name": player.get("name") or player.get("username") or "Unknown Player",
        "position": player.get("position") or "Not specified",
    }


class SessionService:
    """Service for training session business logic."""

    def __init__(self, db: Database, cache: Optional[ResponseCache] = None,
                 player_cache: Optional[ResponseCache] = None):
        self.repository = SessionRepository(db)
        self.players = PlayerService(db, player_cache)
        self.cache = cache

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def list_sessions(self, academy_id: str) -> list[dict]:
        require(academyId=academy_id)
        sessions = self.repository.get_by_academy(academy_id.strip())
        logger.info("Found %d sessions for academy %s", len(sessions), academy_id)
        return [self._to_response(s) for s in sessions]

    def list_for_coach(self, coach_id: str, academy_id: Optional[str] = None) -> list[dict]:
        return [self._to_response(s) for s in self.repository.get_by_coach(coach_id, academy_id)]

    def get_session(self, session_id: str) -> dict:
        if self.cache is not None:
            cached = self.cache.get(session_id)
            if cached is not None:
                logger.debug("Returning cached session data for %s", session_id)
                return cached

        session = self._find(session_id)
        if session is None:
            raise NotFoundError("Session not found")

        data = self._to_response(session)
        if session.get("isOccurrence") and session.get("parentSessionId") is not None:
            parent = self.repository.find_by_id(session["parentSessionId"])
            if parent:
                data["parentSessionData"] = {f: parent.get(f) for f in PARENT_SUMMARY_FIELDS}

        if self.cache is not None:
            self.cache.set(_session_key(session), data, aliases=(session_id,))
        return data

    def list_occurrences(self, parent_id: str, academy_id: str, status: Optional[str] = None) -> list[dict]:
        require(parentId=parent_id, academyId=academy_id)
        occurrences = self.repository.get_occurrences(parent_id, academy_id.strip(), status)
        logger.info("Found %d occurrences for parent %s", len(occurrences), parent_id)
        results = []
        for occurrence in occurrences:
            data = self._to_response(occurrence)
            data["assignedPlayersData"] = [_player_summary(p) for p in occurrence.get("assignedPlayersData", [])]
            results.append(data)
        return results

    def count_occurrences(self, parent_id: str, academy_id: str) -> int:
        return self.repository.count_occurrences(parent_id, academy_id)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def create_session(self, data: SessionCreate) -> dict:
        doc = data.to_document()
        doc.setdefault("attendance", {})
        doc.setdefault("playerMetrics", {})
        recurring = bool(data.isRecurring and data.recurringEndDate)
        if recurring:
            _check_recurrence_span(doc)
        session = self.repository.insert(doc)

        if recurring:
            occurrences = self._expand(session)
            session["totalOccurrences"] = len(occurrences)
        return self._to_response(session)

    def generate_occurrences(self, session_id: str) -> list[dict]:
        """Expand a recurring session into its occurrence documents."""
        parent = self._get_or_404(session_id)
        if not parent.get("recurringEndDate") or not parent.get("date"):
            raise ValidationError("Session is not recurring")
        _check_recurrence_span(parent)
        parent_id = _session_key(parent)
        if self.repository.count_occurrences(parent_id, parent.get("academyId", "")):
            raise ConflictError("Occurrences already generated")
        return [self._to_response(o) for o in self._expand(parent)]

    def update_session(self, session_id: str, data: SessionUpdate) -> dict:
        changes = data.changes()
        if not changes:
            raise ValidationError("No changes provided")
        session = self.repository.update_fields(self._get_or_404(session_id)["_id"], changes)
        if session is None:
            raise NotFoundError("Session not found")
        self._invalidate(session, session_id)
        return self._to_response(session)

    def update_occurrences(self, parent_id: str, data: OccurrenceUpdate) -> int:
        changes = data.changes()
        academy_id = changes.pop("academyId")
        if not changes:
            raise ValidationError("No changes provided")
        modified = self.repository.update_occurrences(parent_id, academy_id, changes)
        if self.cache is not None:
            self.cache.clear()
        return modified

    def delete_session(self, session_id: str) -> None:
        session = self._get_or_404(session_id)
        self.repository.soft_delete(session["_id"])
        self._invalidate(session, session_id)

    def delete_sessions(self, session_ids: list[str], academy_id: str) -> int:
        """Permanently delete sessions of one academy by ``_id`` or ``id``."""
        deleted = self.repository.hard_delete(session_ids, {"academyId": academy_id})
        if self.cache is not None:
            self.cache.clear()
        logger.info("Deleted %d sessions from academy %s", deleted, academy_id)
        return deleted

    def clear_academy(self, academy_id: str) -> int:
        """Permanently delete every session, occurrence included, of one academy."""
        require(academyId=academy_id)
        deleted = self.repository.delete_by_academy(academy_id)
        if self.cache is not None:
            self.cache.clear()
        logger.warning("Cleared %d sessions from academy %s", deleted, academy_id)
        return deleted

    def mark_attendance(self, session_id: str, player_id: str, present: bool) -> dict:
        key = _player_key(player_id)
        target = self._get_or_404(session_id)
        session = self.repository.update(target["_id"], {"$set": {f"attendance.{key}": attendance_mark(present, utcnow())}})
        if session is None:
            raise NotFoundError("Session not found")
        self._invalidate(session, session_id)
        return session["attendance"][key]

    def record_player_metrics(self, session_id: str, player_id: str, metrics: SessionMetrics) -> None:
        """Update the player's attributes and history, then the session's metrics map."""
        key = _player_key(player_id)
        session = self._get_or_404(session_id)
        session_ref = _session_key(session)

        self.players.record_session_metrics(player_id, session_ref, metrics)

        entry = {**metrics.to_document(), "updatedAt": utcnow()}
        updated = self.repository.update(session["_id"], {"$set": {f"playerMetrics.{key}": entry}})
        if updated is None:
            logger.error("Session %s vanished after player %s metrics were recorded", session_ref, player_id)
            raise NotFoundError("Session not found")
        self._invalidate(updated, session_id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _find(self, session_id: str) -> Optional[dict]:
        session = self.repository.find_by_id(session_id)
        if session is None and "-" in session_id:
            # composite "<parent>-<occurrence>" ids address the occurrence
            session = self.repository.find_by_id(session_id.rsplit("-", 1)[1])
        if session is not None and session.get("isDeleted"):
            return None
        return session

    def _get_or_404(self, session_id: Any) -> dict:
        session = self._find(str(session_id))
        if session is None:
            raise NotFoundError("Session not found")
        return session

    def _expand(self, parent: dict) -> list[dict]:
        occurrences = self.repository.insert_occurrences(expand_occurrences(parent))
        self.repository.update_fields(parent["_id"], {"totalOccurrences": len(occurrences)})
        logger.info("Generated %d occurrences for session %s", len(occurrences), parent.get("id"))
        return occurrences

    def _invalidate(self, session: dict, *keys: str) -> None:
        if self.cache is None:
            return
        for key in (*keys, _session_key(session), session.get("_id")):
            if key is not None:
                self.cache.invalidate(str(key))

    @staticmethod
    def _to_response(session: dict) -> dict:
        data = serialize_document(session)
        data.setdefault("attendance", {})
        data.setdefault("playerRatings", {})
        data.setdefault("playerMetrics", {})
        return data
