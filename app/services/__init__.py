"""Business logic services."""

from app.services.academy_service import AcademyService
from app.services.attendance_service import AttendanceService
from app.services.batch_service import BatchService
from app.services.coach_service import CoachService
from app.services.finance_service import FinanceService
from app.services.player_service import PlayerService
from app.services.session_export_service import SessionExportService
from app.services.session_service import SessionService
from app.services.user_info_service import UserInfoService
from app.services.user_service import UserService

__all__ = [
    "AcademyService",
    "AttendanceService",
    "BatchService",
    "CoachService",
    "FinanceService",
    "PlayerService",
    "SessionExportService",
    "SessionService",
    "UserInfoService",
    "UserService",
]
