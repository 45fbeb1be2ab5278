"""
Attendance record repository.

Daily attendance lives in ``ams-attendance``, one document per
``(academyId, userId, date, type)``; session attendance stays on the session.
"""

from typing import Optional

from app.db.repositories.base import DocumentRepository


class AttendanceRepository(DocumentRepository):
    collection_name = "ams-attendance"

    def get_by_academy(self, academy_id: str, date: Optional[str] = None,
                       record_type: Optional[str] = None) -> list[dict]:
        query = {"academyId": academy_id}
        if date:
            query["date"] = date
        if record_type:
            query["type"] = record_type
        return self.find_by_filter(query, sort=[("date", -1), ("userId", 1)])

    def upsert_record(self, key: dict, patch: dict) -> dict:
        return self.upsert(key, patch)
