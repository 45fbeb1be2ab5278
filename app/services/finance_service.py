"""
Finance service.

Transactions are never removed: deleting one sets its status to ``deleted``.
Uploaded documents are stored inline as base64 and decoded on download.
"""

from typing import Optional

from pymongo.database import Database

from app.api.responses import serialize_document
from app.core.errors import NotFoundError, ValidationError
from app.db.repositories.finance import FinanceDocumentRepository, FinanceRepository
from app.db.repositories.base import utcnow
from app.models.finance import TransactionStatus, decode_payload, new_transaction_id
from app.schemas.finance import FinanceDocumentCreate, TransactionCreate


class FinanceService:
    def __init__(self, db: Database):
        self.repository = FinanceRepository(db)
        self.documents = FinanceDocumentRepository(db)

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    def list_transactions(self, academy_id: str) -> list[dict]:
        return [serialize_document(t) for t in self.repository.get_by_academy(academy_id)]

    def create_transaction(self, data: TransactionCreate) -> dict:
        document_id: Optional[str] = None
        if data.documentUrl:
            document_id = data.documentUrl.rstrip("/").split("/")[-1]
        transaction = self.repository.insert({
            "academyId": data.academyId,
            "type": data.type,
            "amount": data.amount,
            "description": data.description,
            "date": data.date or utcnow().isoformat(),
            "transactionId": new_transaction_id(),
            "documentId": document_id,
            "status": TransactionStatus.ACTIVE.value,
        })
        return serialize_document(transaction)

    def update_status(self, transaction_id: str, status: TransactionStatus) -> dict:
        transaction = self.repository.update_fields(transaction_id, {"status": status.value})
        if transaction is None:
            raise NotFoundError("Transaction not found")
        return serialize_document(transaction)

    def delete_transaction(self, transaction_id: str) -> None:
        self.update_status(transaction_id, TransactionStatus.DELETED)

    # ------------------------------------------------------------------
    # Documents
    # ------------------------------------------------------------------

    def upload_document(self, data: FinanceDocumentCreate) -> dict:
        try:
            size = len(decode_payload(data.data))
        except ValueError:
            raise ValidationError("data must be base64 encoded") from None
        doc = self.documents.insert({
            "academyId": data.academyId,
            "filename": data.filename,
            "contentType": data.contentType,
            "data": data.data,
            "size": size,
        })
        meta = serialize_document(doc)
        meta.pop("data", None)
        meta["url"] = f"/api/v1/docs/{meta['_id']}"
        return meta

    def list_documents(self, academy_id: str) -> list[dict]:
        return [serialize_document(d) for d in self.documents.list_metadata(academy_id)]

    def get_document_file(self, document_id: str) -> tuple[bytes, str, str]:
        """Return ``(content, content_type, filename)`` for a stored document."""
        doc = self.documents.find_by_id(document_id)
        if not doc or doc.get("isDeleted"):
            raise NotFoundError("Document not found")
        return decode_payload(doc["data"]), doc.get("contentType") or "application/octet-stream", \
            doc.get("filename") or "document"
