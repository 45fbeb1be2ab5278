"""
Database initialization.

Creates the secondary indexes used by the academy-scoped queries.
"""

import logging

from pymongo import ASCENDING, IndexModel
from pymongo.database import Database
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

INDEXES: dict[str, list[IndexModel]] = {
    "ams-sessions": [
        IndexModel([("id", ASCENDING)], name="id_index"),
        IndexModel([("academyId", ASCENDING)], name="academy_index"),
        IndexModel([("parentSessionId", ASCENDING)], name="parent_session_index"),
        IndexModel([("assignedPlayers", ASCENDING)], name="players_index"),
        IndexModel([("status", ASCENDING)], name="status_index"),
        IndexModel([("date", ASCENDING)], name="date_index"),
        IndexModel([("academyId", ASCENDING), ("parentSessionId", ASCENDING)], name="academy_parent_compound"),
        IndexModel([("academyId", ASCENDING), ("status", ASCENDING)], name="academy_status_compound"),
    ],
    "ams-player-data": [
        IndexModel([("id", ASCENDING)], name="id_index"),
        IndexModel([("academyId", ASCENDING)], name="academy_index"),
        IndexModel([("userId", ASCENDING)], name="user_index"),
    ],
    "ams-batches": [
        IndexModel([("id", ASCENDING)], name="id_index"),
        IndexModel([("academyId", ASCENDING)], name="academy_index"),
        IndexModel([("players", ASCENDING)], name="players_index"),
    ],
    "ams-users": [
        IndexModel([("username", ASCENDING)], name="username_index"),
        IndexModel([("academyId", ASCENDING), ("role", ASCENDING)], name="academy_role_compound"),
    ],
    "ams-users-info": [
        IndexModel([("userId", ASCENDING), ("academyId", ASCENDING)], name="user_academy_unique", unique=True),
    ],
    "ams-attendance": [
        IndexModel([("academyId", ASCENDING), ("userId", ASCENDING), ("date", ASCENDING), ("type", ASCENDING)],
                   name="academy_user_date_type_unique", unique=True),
    ],
    "ams-coaches": [
        IndexModel([("academyId", ASCENDING)], name="academy_index"),
    ],
    "ams-finance": [
        IndexModel([("academyId", ASCENDING), ("date", ASCENDING)], name="academy_date_compound"),
        IndexModel([("status", ASCENDING)], name="status_index"),
    ],
}


def init_db(db: Database) -> None:
    """Create all indexes. Failures are logged and do not stop startup."""
    for collection_name, indexes in INDEXES.items():
        try:
            db[collection_name].create_indexes(indexes)
        except PyMongoError as e:
            logger.warning("Index creation failed for %s: %s", collection_name, e)
            continue
        logger.info("Indexes ready for %s", collection_name)
