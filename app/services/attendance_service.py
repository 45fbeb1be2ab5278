"""Daily attendance record service."""

from typing import Optional

from pymongo.database import Database

from app.api.responses import serialize_document
from app.core.errors import require
from app.db.repositories.attendance import AttendanceRepository
from app.schemas.attendance import AttendanceRecordUpsert

KEY_FIELDS = ("academyId", "userId", "date", "type")


class AttendanceService:
    def __init__(self, db: Database):
        self.repository = AttendanceRepository(db)

    def list_records(self, academy_id: str, date: Optional[str] = None,
                     record_type: Optional[str] = None) -> list[dict]:
        require(academyId=academy_id)
        return [serialize_document(r) for r in self.repository.get_by_academy(academy_id, date, record_type)]

    def record(self, data: AttendanceRecordUpsert) -> dict:
        """Create the record for its key or update its status and marker."""
        values = data.model_dump()
        key = {field: values.pop(field) for field in KEY_FIELDS}
        return serialize_document(self.repository.upsert_record(key, values))
