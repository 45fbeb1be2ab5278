"""Pydantic schemas for request/response validation."""

from app.schemas.academy import AcademyCreate
from app.schemas.attendance import AttendanceRecordUpsert
from app.schemas.batch import BatchCreate, BatchDelete, BatchUpdate
from app.schemas.coach import CoachRatingCreate, CoachUpdate
from app.schemas.common import ApiResponse
from app.schemas.finance import FinanceDocumentCreate, TransactionCreate, TransactionStatusUpdate
from app.schemas.player import (
    MatchPointsUpdate,
    PlayerCreate,
    PlayerMetricsUpdate,
    PlayerStatsUpdate,
    PlayerUpdate,
    SessionMetrics,
)
from app.schemas.session import (
    AttendanceUpdate,
    OccurrenceUpdate,
    SessionActionRequest,
    SessionBulkDelete,
    SessionCreate,
    SessionMetricsUpdate,
    SessionUpdate,
)
from app.schemas.user import LoginRequest, Token, UserCreate, UserUpdate
from app.schemas.user_info import UserInfoUpsert

__all__ = [
    "AcademyCreate",
    "ApiResponse",
    "AttendanceRecordUpsert",
    "AttendanceUpdate",
    "BatchCreate",
    "BatchDelete",
    "BatchUpdate",
    "CoachRatingCreate",
    "CoachUpdate",
    "FinanceDocumentCreate",
    "LoginRequest",
    "MatchPointsUpdate",
    "OccurrenceUpdate",
    "PlayerCreate",
    "PlayerMetricsUpdate",
    "PlayerStatsUpdate",
    "PlayerUpdate",
    "SessionActionRequest",
    "SessionBulkDelete",
    "SessionCreate",
    "SessionMetrics",
    "SessionMetricsUpdate",
    "SessionUpdate",
    "Token",
    "TransactionCreate",
    "TransactionStatusUpdate",
    "UserCreate",
    "UserInfoUpsert",
    "UserUpdate",
]
