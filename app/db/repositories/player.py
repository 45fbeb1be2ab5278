"""
Player repository.

Handles ``ams-player-data``: academy-scoped player profiles with a numeric
``attributes`` record and an append-only ``performanceHistory``.
"""

from typing import Any, Optional

from app.db.lookup import NATIVE_ID, STRING_ID, by_fields
from app.db.repositories.base import NOT_DELETED, DocumentRepository

HISTORY_FIELD = "performanceHistory"


class PlayerRepository(DocumentRepository):
    """Repository for player documents."""

    collection_name = "ams-player-data"
    lookup = (NATIVE_ID, STRING_ID, *by_fields("userId", "username", "playerId"))

    def get_by_academy(self, academy_id: str) -> list[dict]:
        return self.find_by_filter({"academyId": academy_id, **NOT_DELETED}, sort=[("name", 1)])

    def get_many(self, player_ids: list[str]) -> list[dict]:
        return self.find_by_ids(player_ids)

    def append_performance(self, player_id: Any, entry: dict, set_fields: Optional[dict] = None) -> bool:
        return self.append_history(player_id, HISTORY_FIELD, entry, set_fields)
