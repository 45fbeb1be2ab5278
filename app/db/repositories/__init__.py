"""Database repositories."""

from app.db.repositories.academy import AcademyRepository
from app.db.repositories.attendance import AttendanceRepository
from app.db.repositories.batch import BatchRepository
from app.db.repositories.coach import CoachRepository
from app.db.repositories.finance import FinanceDocumentRepository, FinanceRepository
from app.db.repositories.player import PlayerRepository
from app.db.repositories.session import SessionRepository
from app.db.repositories.user import OwnerRepository, UserRepository
from app.db.repositories.user_info import UserInfoRepository

__all__ = [
    "AcademyRepository",
    "AttendanceRepository",
    "BatchRepository",
    "CoachRepository",
    "FinanceDocumentRepository",
    "FinanceRepository",
    "OwnerRepository",
    "PlayerRepository",
    "SessionRepository",
    "UserInfoRepository",
    "UserRepository",
]
