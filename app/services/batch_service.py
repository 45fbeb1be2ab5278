"""
Batch service.

Batch listings join coach display names from ``ams-users`` with a second
query rather than a store-side join.
"""

import logging

from pymongo.database import Database

from app.api.responses import serialize_document
from app.core.errors import NotFoundError, ValidationError
from app.db.repositories.batch import BatchRepository
from app.db.repositories.user import UserRepository
from app.schemas.batch import BatchCreate, BatchUpdate

logger = logging.getLogger(__name__)


def _coach_ids(batch: dict) -> list[str]:
    ids = []
    if batch.get("coachId"):
        ids.append(batch["coachId"])
    ids.extend(batch.get("coachIds") or [])
    return ids


class BatchService:
    def __init__(self, db: Database):
        self.repository = BatchRepository(db)
        self.users = UserRepository(db)

    def list_batches(self, academy_id: str) -> list[dict]:
        batches = self.repository.get_by_academy(academy_id)
        logger.info("Fetched %d batches for academy %s", len(batches), academy_id)

        wanted = sorted({coach_id for batch in batches for coach_id in _coach_ids(batch)})
        names: dict[str, str] = {}
        for coach in self.users.get_coaches_by_ids(wanted):
            display = coach.get("name") or coach.get("username")
            names[str(coach["_id"])] = display
            if coach.get("id"):
                names[str(coach["id"])] = display

        return [self._to_response(batch, names) for batch in batches]

    def get_batch(self, batch_id: str) -> dict:
        batch = self.repository.find_by_id(batch_id)
        if not batch or batch.get("isDeleted"):
            raise NotFoundError("Batch not found")
        return self._to_response(batch)

    def create_batch(self, data: BatchCreate) -> dict:
        return self._to_response(self.repository.insert(data.to_document()))

    def update_batch(self, batch_id: str, data: BatchUpdate) -> dict:
        changes = data.changes()
        if not changes:
            raise ValidationError("No changes provided")
        batch = self.repository.update_fields(batch_id, changes)
        if batch is None:
            raise NotFoundError("Batch not found")
        return self._to_response(batch)

    def delete_batches(self, batch_ids: list[str]) -> int:
        """Permanently delete batches; returns how many documents were removed."""
        deleted = self.repository.hard_delete(batch_ids)
        logger.info("Deleted %d of %d requested batches", deleted, len(set(batch_ids)))
        return deleted

    @staticmethod
    def _to_response(batch: dict, coach_names: dict[str, str] | None = None) -> dict:
        data = serialize_document(batch)
        data["name"] = batch.get("name") or "Unnamed Batch"
        data.setdefault("players", [])
        if coach_names is not None:
            names = [coach_names[c] for c in _coach_ids(batch) if c in coach_names]
            data["coachNames"] = names
            data["coachName"] = ", ".join(names) or "Unassigned"
        return data
