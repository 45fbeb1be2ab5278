"""Batch repository."""

from app.db.repositories.base import NOT_DELETED, DocumentRepository


class BatchRepository(DocumentRepository):
    """Repository for ``ams-batches``: named groups of players under coaches."""

    collection_name = "ams-batches"

    def get_by_academy(self, academy_id: str) -> list[dict]:
        return self.find_by_filter({"academyId": academy_id, **NOT_DELETED}, sort=[("name", 1)])
