"""Finance domain model."""

import base64
import binascii
import random
import time
from enum import Enum


class TransactionStatus(str, Enum):
    ACTIVE = "active"
    DELETED = "deleted"


def new_transaction_id() -> str:
    """``TXN-<epoch millis>-<3 random digits>``."""
    return f"TXN-{int(time.time() * 1000)}-{random.randint(0, 999):03d}"


def decode_payload(data: str) -> bytes:
    """Decode a stored base64 payload, tolerating a ``data:...;base64,`` prefix."""
    if "," in data and data.startswith("data:"):
        data = data.split(",", 1)[1]
    try:
        return base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"invalid base64 payload: {e}") from e
