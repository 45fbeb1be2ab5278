"""
Training session endpoints.

Sessions, recurring occurrences, attendance, per-player metrics and CSV export.
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends, Query, Response, status
from pymongo.database import Database

from app.api.dependencies import get_player_cache, get_session_cache
from app.api.responses import NO_CACHE_HEADERS, envelope
from app.core.cache import ResponseCache
from app.db.session import get_db
from app.models.session import SessionStatus
from app.schemas.common import ApiResponse
from app.schemas.session import (
    AttendanceUpdate,
    OccurrenceUpdate,
    SessionActionRequest,
    SessionBulkDelete,
    SessionCreate,
    SessionMetricsUpdate,
    SessionUpdate,
)
from app.services.session_export_service import SessionExportService
from app.services.session_service import SessionService

router = APIRouter()


def get_service(db: Database = Depends(get_db), cache: ResponseCache = Depends(get_session_cache),
                player_cache: ResponseCache = Depends(get_player_cache)) -> SessionService:
    return SessionService(db, cache, player_cache)


@router.get("", summary="List sessions of an academy.", response_model=ApiResponse, response_model_exclude_none=True)
def list_sessions(academyId: str = Query(..., min_length=1), service: SessionService = Depends(get_service)):
    return envelope(service.list_sessions(academyId))


@router.post("", summary="Create a session.", response_model=ApiResponse, response_model_exclude_none=True,
             status_code=status.HTTP_201_CREATED)
def create_session(data: SessionCreate, service: SessionService = Depends(get_service)):
    return envelope(service.create_session(data))


@router.delete("", summary="Permanently delete sessions by id.", response_model=ApiResponse,
               response_model_exclude_none=True)
def delete_sessions(data: SessionBulkDelete = Body(...), service: SessionService = Depends(get_service)):
    deleted = service.delete_sessions(data.sessionIds, data.academyId)
    return envelope({"deletedCount": deleted})


@router.get("/export", summary="Export an academy's sessions as CSV.", response_class=Response)
def export_sessions(academyId: str = Query(..., min_length=1), db: Database = Depends(get_db)):
    content, filename = SessionExportService(db).export_csv(academyId)
    headers = {**NO_CACHE_HEADERS, "Content-Disposition": f'attachment; filename="{filename}"'}
    return Response(content=content, media_type="text/csv; charset=utf-8", headers=headers)


@router.post("/actions", summary="Run an academy-wide action on sessions.", response_model=ApiResponse,
             response_model_exclude_none=True)
def run_action(data: SessionActionRequest, service: SessionService = Depends(get_service)):
    # clear is the only action
    return envelope({"deletedCount": service.clear_academy(data.academyId)})


@router.get("/coach", summary="Sessions run by a coach.", response_model=ApiResponse, response_model_exclude_none=True)
def list_coach_sessions(coachId: str = Query(..., min_length=1), academyId: Optional[str] = Query(None),
                        service: SessionService = Depends(get_service)):
    return envelope(service.list_for_coach(coachId, academyId))


@router.get("/occurrences", summary="Occurrences of a recurring session.", response_model=ApiResponse,
            response_model_exclude_none=True)
def list_occurrences(parentId: str = Query(..., min_length=1), academyId: str = Query(..., min_length=1),
                     session_status: Optional[SessionStatus] = Query(None, alias="status"),
                     service: SessionService = Depends(get_service)):
    return envelope(service.list_occurrences(parentId, academyId, session_status.value if session_status else None))


@router.get("/occurrences/count", summary="Number of occurrences of a recurring session.",
            response_model=ApiResponse, response_model_exclude_none=True)
def count_occurrences(parentId: str = Query(..., min_length=1), academyId: str = Query(..., min_length=1),
                      service: SessionService = Depends(get_service)):
    return envelope({"total": service.count_occurrences(parentId, academyId)})


@router.get("/{session_id}", summary="Get a session.", response_model=ApiResponse, response_model_exclude_none=True)
def get_session(session_id: str, service: SessionService = Depends(get_service)):
    return envelope(service.get_session(session_id))


@router.patch("/{session_id}", summary="Update a session.", response_model=ApiResponse,
              response_model_exclude_none=True)
def update_session(session_id: str, data: SessionUpdate, service: SessionService = Depends(get_service)):
    return envelope(service.update_session(session_id, data))


@router.delete("/{session_id}", summary="Mark a session as deleted.", response_model=ApiResponse,
               response_model_exclude_none=True)
def delete_session(session_id: str, service: SessionService = Depends(get_service)):
    service.delete_session(session_id)
    return envelope()


@router.post("/{session_id}/occurrences", summary="Generate occurrences for a recurring session.",
             response_model=ApiResponse, response_model_exclude_none=True, status_code=status.HTTP_201_CREATED)
def generate_occurrences(session_id: str, service: SessionService = Depends(get_service)):
    return envelope(service.generate_occurrences(session_id))


@router.patch("/{session_id}/occurrences", summary="Update every occurrence of a recurring session.",
              response_model=ApiResponse, response_model_exclude_none=True)
def update_occurrences(session_id: str, data: OccurrenceUpdate, service: SessionService = Depends(get_service)):
    return envelope({"modifiedCount": service.update_occurrences(session_id, data)})


@router.patch("/{session_id}/attendance", summary="Mark a player present or absent.", response_model=ApiResponse,
              response_model_exclude_none=True)
def update_attendance(session_id: str, data: AttendanceUpdate, service: SessionService = Depends(get_service)):
    return envelope(service.mark_attendance(session_id, data.playerId, data.status))


@router.patch("/{session_id}/metrics", summary="Record a player's metrics for a session.",
              response_model=ApiResponse, response_model_exclude_none=True)
def update_metrics(session_id: str, data: SessionMetricsUpdate, service: SessionService = Depends(get_service)):
    service.record_player_metrics(session_id, data.playerId, data.metrics)
    return envelope()
