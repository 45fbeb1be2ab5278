"""Daily attendance record endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from pymongo.database import Database

from app.api.responses import envelope
from app.db.session import get_db
from app.schemas.attendance import AttendanceRecordUpsert
from app.schemas.common import ApiResponse
from app.services.attendance_service import AttendanceService

router = APIRouter()


@router.get("", summary="List attendance records of an academy.", response_model=ApiResponse,
            response_model_exclude_none=True)
def list_records(academyId: str = Query(..., min_length=1), date: Optional[str] = Query(None),
                 record_type: Optional[str] = Query(None, alias="type"), db: Database = Depends(get_db)):
    return envelope(AttendanceService(db).list_records(academyId, date, record_type))


@router.post("", summary="Create or update an attendance record.", response_model=ApiResponse,
             response_model_exclude_none=True)
def record_attendance(data: AttendanceRecordUpsert, db: Database = Depends(get_db)):
    return envelope(AttendanceService(db).record(data))
