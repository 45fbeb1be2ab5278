"""
User domain model.

Documents are schemaless; this module only names the values the API relies on.
"""

from enum import Enum


class Role(str, Enum):
    ADMIN = "admin"
    COACH = "coach"
    PLAYER = "player"
    COORDINATOR = "coordinator"
    OWNER = "owner"


# Fields never returned to callers
PRIVATE_FIELDS = ("password", "hashed_password")


def public_user(doc: dict) -> dict:
    return {key: value for key, value in doc.items() if key not in PRIVATE_FIELDS}
