"""
Response envelope helpers.

Every endpoint answers ``{"success": true, "data": ...}``; failures are
produced by the exception handlers in :mod:`app.core.errors`.
"""

import datetime
from typing import Any

from bson import ObjectId

NO_CACHE_HEADERS = {
    "Cache-Control": "no-store, no-cache, must-revalidate, max-age=0",
    "Pragma": "no-cache",
    "Expires": "0",
}


def serialize(value: Any) -> Any:
    """Recursively turn store values into JSON-friendly ones.

    ``ObjectId`` becomes its hex string and datetimes become ISO strings;
    everything else is passed through.
    """
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, (datetime.datetime, datetime.date)):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: serialize(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize(item) for item in value]
    return value


def serialize_document(doc: dict) -> dict:
    """Serialize a stored document, guaranteeing a string ``id`` and ``_id``."""
    out = serialize(doc)
    if "_id" in out:
        out.setdefault("id", out["_id"])
        if out.get("id") in (None, ""):
            out["id"] = out["_id"]
    return out


def envelope(data: Any = None, **extra: Any) -> dict:
    body = {"success": True, "data": serialize(data)}
    body.update(extra)
    return body
