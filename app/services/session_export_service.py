"""
Session CSV export.

One row per non-deleted session of an academy. Batch, player and coach names
are joined from their own collections with one query each.
"""

import csv
import datetime
import io
from typing import Any, Iterable, Optional

from pymongo.database import Database

from app.core.errors import require
from app.db.repositories.base import utcnow
from app.db.repositories.batch import BatchRepository
from app.db.repositories.player import PlayerRepository
from app.db.repositories.session import SessionRepository
from app.db.repositories.user import UserRepository
from app.models.session import session_duration

EXPORT_COLUMNS = (
    "Session ID",
    "Session Name",
    "Is Recurring",
    "Parent Session ID",
    "Occurrence Date",
    "Date",
    "Start Time",
    "End Time",
    "Duration",
    "Status",
    "Days (selectedDays)",
    "Assigned Batch ID",
    "Assigned Batch Name",
    "Assigned Players (IDs)",
    "Assigned Players (Names)",
    "Assigned Coaches (IDs)",
    "Assigned Coaches (Names)",
    "Academy ID",
    "Notes",
)


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _join(values: Any, separator: str = ", ") -> str:
    if isinstance(values, (list, tuple)):
        return separator.join(_text(v) for v in values)
    return _text(values)


def _coach_ids(session: dict) -> list[str]:
    ids = []
    for coach_id in [session.get("coachId"), *(session.get("coachIds") or [])]:
        if coach_id and str(coach_id) not in ids:
            ids.append(str(coach_id))
    return ids


def _name_index(docs: Iterable[dict]) -> dict[str, str]:
    index = {}
    for doc in docs:
        name = doc.get("name") or doc.get("username") or ""
        for field in ("_id", "id"):
            if doc.get(field) is not None:
                index[str(doc[field])] = name
    return index


class SessionExportService:
    def __init__(self, db: Database):
        self.sessions = SessionRepository(db)
        self.batches = BatchRepository(db)
        self.players = PlayerRepository(db)
        self.users = UserRepository(db)

    def export_csv(self, academy_id: str, today: Optional[datetime.date] = None) -> tuple[str, str]:
        """Return ``(csv_text, filename)`` for the academy's sessions."""
        require(academyId=academy_id)
        sessions = self.sessions.get_by_academy(academy_id)

        batch_names = _name_index(self.batches.get_by_academy(academy_id))
        player_ids = sorted({str(p) for s in sessions for p in s.get("assignedPlayers") or []})
        player_names = _name_index(self.players.find_by_ids(player_ids)) if player_ids else {}
        coach_ids = sorted({c for s in sessions for c in _coach_ids(s)})
        coach_names = _name_index(self.users.get_coaches_by_ids(coach_ids))

        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(EXPORT_COLUMNS)
        for session in sessions:
            writer.writerow(self._row(session, batch_names, player_names, coach_names))

        day = today or utcnow().date()
        return buffer.getvalue(), f"sessions_export_{academy_id}_{day.isoformat()}.csv"

    @staticmethod
    def _row(session: dict, batch_names: dict[str, str], player_names: dict[str, str],
             coach_names: dict[str, str]) -> list[str]:
        players = [str(p) for p in session.get("assignedPlayers") or []]
        coaches = _coach_ids(session)
        batch_id = session.get("assignedBatch") or session.get("batchId")
        stored_coach_names = session.get("coachNames")
        return [
            _text(session.get("id") or session.get("_id")),
            _text(session.get("name")),
            "Yes" if session.get("isRecurring") else "No",
            _text(session.get("parentSessionId")),
            _text(session.get("occurrenceDate")),
            _text(session.get("date")),
            _text(session.get("startTime")),
            _text(session.get("endTime")),
            session_duration(session.get("startTime"), session.get("endTime")),
            _text(session.get("status")),
            _join(session.get("selectedDays"), "; "),
            _text(batch_id),
            batch_names.get(str(batch_id), "") if batch_id else "",
            ", ".join(players),
            ", ".join(player_names[p] for p in players if p in player_names),
            ", ".join(coaches),
            _join(stored_coach_names) if stored_coach_names else
            ", ".join(coach_names[c] for c in coaches if c in coach_names),
            _text(session.get("academyId")),
            "",
        ]
