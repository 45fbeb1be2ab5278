"""Domain models: the named values and rules attached to stored documents."""

from app.models.finance import TransactionStatus
from app.models.player import PerformanceEntry, PerformanceType
from app.models.session import AttendanceStatus, SessionAction, SessionStatus
from app.models.user import Role

__all__ = [
    "AttendanceStatus",
    "PerformanceEntry",
    "PerformanceType",
    "Role",
    "SessionAction",
    "SessionStatus",
    "TransactionStatus",
]
