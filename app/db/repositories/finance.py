"""
Finance repositories.

Transactions live in ``ams-finance``; uploaded files (base64 payload plus
content type and filename) in ``ams-finance-docs``.
"""

from app.db.lookup import NATIVE_ID, STRING_ID, by_fields
from app.db.repositories.base import DocumentRepository

DELETED_STATUS = "deleted"


class FinanceRepository(DocumentRepository):
    collection_name = "ams-finance"
    lookup = (NATIVE_ID, STRING_ID, *by_fields("transactionId"))

    def get_by_academy(self, academy_id: str) -> list[dict]:
        """Non-deleted transactions, most recent first."""
        return self.find_by_filter({"academyId": academy_id, "status": {"$ne": DELETED_STATUS}},
                                   sort=[("date", -1)])


class FinanceDocumentRepository(DocumentRepository):
    collection_name = "ams-finance-docs"

    def list_metadata(self, academy_id: str) -> list[dict]:
        """Uploaded documents for an academy, without their payload."""
        return self.find_by_filter({"academyId": academy_id, "isDeleted": {"$ne": True}},
                                   sort=[("createdAt", -1)], projection={"data": 0})
