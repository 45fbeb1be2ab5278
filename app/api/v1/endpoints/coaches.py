"""Coach endpoints: profiles, student ratings and session statistics."""

from fastapi import APIRouter, Depends, Query
from pymongo.database import Database

from app.api.responses import envelope
from app.db.session import get_db
from app.schemas.coach import CoachRatingCreate, CoachUpdate
from app.schemas.common import ApiResponse
from app.services.coach_service import CoachService

router = APIRouter()


@router.get("", summary="List coaches of an academy.", response_model=ApiResponse, response_model_exclude_none=True)
def list_coaches(academyId: str = Query(..., min_length=1), db: Database = Depends(get_db)):
    return envelope(CoachService(db).list_coaches(academyId))


@router.post("/rating", summary="Submit a rating for a coach.", response_model=ApiResponse,
             response_model_exclude_none=True)
def rate_coach(data: CoachRatingCreate, db: Database = Depends(get_db)):
    return envelope(CoachService(db).add_rating(data))


@router.get("/ratings", summary="Ratings received by a coach.", response_model=ApiResponse,
            response_model_exclude_none=True)
def get_ratings(coachId: str = Query(..., min_length=1), db: Database = Depends(get_db)):
    return envelope(CoachService(db).get_ratings(coachId))


@router.get("/{coach_id}", summary="Get a coach.", response_model=ApiResponse, response_model_exclude_none=True)
def get_coach(coach_id: str, db: Database = Depends(get_db)):
    return envelope(CoachService(db).get_coach(coach_id))


@router.patch("/{coach_id}", summary="Update a coach profile.", response_model=ApiResponse,
              response_model_exclude_none=True)
def update_coach(coach_id: str, data: CoachUpdate, db: Database = Depends(get_db)):
    return envelope(CoachService(db).update_coach(coach_id, data))


@router.get("/{coach_id}/stats", summary="Session counts for a coach.", response_model=ApiResponse,
            response_model_exclude_none=True)
def get_stats(coach_id: str, db: Database = Depends(get_db)):
    return envelope(CoachService(db).get_session_stats(coach_id))
