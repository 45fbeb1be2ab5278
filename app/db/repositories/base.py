"""
Generic document repository.

Each entity repository binds one collection and the ordered lookup
strategies for its identifiers. Updates are shallow: ``$set`` replaces
top-level fields, so nested objects such as ``attributes`` are overwritten
wholesale unless the caller merges them first.
"""

import datetime
from typing import Any, Iterable, Optional, Sequence

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database

from app.db.lookup import NATIVE_ID, STRING_ID, LookupStrategy, ids_filter, resolve

NOT_DELETED = {"isDeleted": {"$ne": True}}


def utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc).replace(tzinfo=None)


class DocumentRepository:
    """Repository for one document collection."""

    collection_name: str = ""
    lookup: Sequence[LookupStrategy] = (NATIVE_ID, STRING_ID)

    def __init__(self, db: Database):
        self.db = db
        self.collection: Collection = db[self.collection_name]

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def find_by_id(self, entity_id: Any, extra_filter: Optional[dict] = None) -> Optional[dict]:
        return resolve(self.collection, entity_id, self.lookup, extra_filter)

    def find_by_filter(self, query: dict, sort: Optional[list[tuple[str, int]]] = None,
                       limit: Optional[int] = None, projection: Optional[dict] = None) -> list[dict]:
        cursor = self.collection.find(query, projection)
        if sort:
            cursor = cursor.sort(sort)
        if limit:
            cursor = cursor.limit(limit)
        return list(cursor)

    def find_by_ids(self, ids: Iterable[Any], extra_filter: Optional[dict] = None) -> list[dict]:
        query = ids_filter(ids, self.lookup)
        if query is None:
            return []
        return list(self.collection.find({**query, **(extra_filter or {})}))

    def count(self, query: dict) -> int:
        return self.collection.count_documents(query)

    def aggregate(self, pipeline: list[dict]) -> list[dict]:
        return list(self.collection.aggregate(pipeline))

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert(self, doc: dict) -> dict:
        """Insert a new document; ``id`` defaults to the string ``_id``."""
        now = utcnow()
        doc = dict(doc)
        doc.setdefault("_id", ObjectId())
        if not doc.get("id"):
            doc["id"] = str(doc["_id"])
        doc.setdefault("createdAt", now)
        doc.setdefault("updatedAt", now)
        self.collection.insert_one(doc)
        return doc

    def upsert(self, key: dict, patch: dict, defaults: Optional[dict] = None) -> dict:
        """Merge ``patch`` into the document matching ``key``, creating it if absent.

        ``createdAt`` and ``defaults`` are only written on insert; ``updatedAt``
        is refreshed every time.
        """
        now = utcnow()
        on_insert = {"createdAt": now}
        for field, value in (defaults or {}).items():
            if field not in patch:
                on_insert[field] = value
        return self.collection.find_one_and_update(
            key,
            {"$set": {**key, **patch, "updatedAt": now}, "$setOnInsert": on_insert},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )

    def update(self, entity_id: Any, update: dict, extra_filter: Optional[dict] = None) -> Optional[dict]:
        """Apply raw update operators to the document and return its post-image.

        The target is resolved with the ordered lookup first, so a write hits
        the same document a read of ``entity_id`` returns. Soft-deleted
        documents are never updated.
        """
        current = self.find_by_id(entity_id, extra_filter)
        if current is None or current.get("isDeleted"):
            return None
        update = dict(update)
        update["$set"] = {**update.get("$set", {}), "updatedAt": utcnow()}
        return self.collection.find_one_and_update({"_id": current["_id"], **NOT_DELETED}, update,
                                                   return_document=ReturnDocument.AFTER)

    def update_fields(self, entity_id: Any, patch: dict, extra_filter: Optional[dict] = None) -> Optional[dict]:
        """Shallow ``$set`` of top-level fields."""
        return self.update(entity_id, {"$set": patch}, extra_filter)

    def append_history(self, entity_id: Any, field: str, entry: dict,
                       set_fields: Optional[dict] = None) -> bool:
        """Push ``entry`` onto an array field in one atomic update.

        The array is never trimmed.
        """
        return self.update(entity_id, {"$push": {field: entry}, "$set": dict(set_fields or {})}) is not None

    def soft_delete(self, entity_id: Any) -> bool:
        now = utcnow()
        return self.update(entity_id, {"$set": {"isDeleted": True, "deletedAt": now}}) is not None

    def hard_delete(self, ids: Iterable[Any], extra_filter: Optional[dict] = None) -> int:
        """Permanently remove every document matching one of ``ids``."""
        query = ids_filter(set(ids), self.lookup)
        if query is None:
            return 0
        return self.collection.delete_many({**query, **(extra_filter or {})}).deleted_count
