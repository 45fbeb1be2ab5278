"""Academy repository."""

from typing import Optional

from app.db.repositories.base import NOT_DELETED, DocumentRepository


class AcademyRepository(DocumentRepository):
    collection_name = "ams-academy"

    def get_all(self) -> list[dict]:
        return self.find_by_filter(dict(NOT_DELETED), sort=[("name", 1)])

    def get_by_name(self, name: str) -> Optional[dict]:
        return self.collection.find_one({"name": name, **NOT_DELETED})
