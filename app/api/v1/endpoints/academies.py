"""Academy endpoints."""

from fastapi import APIRouter, Depends, status
from pymongo.database import Database

from app.api.responses import envelope
from app.db.session import get_db
from app.schemas.academy import AcademyCreate
from app.schemas.common import ApiResponse
from app.services.academy_service import AcademyService

router = APIRouter()


@router.get("", summary="List academies.", response_model=ApiResponse, response_model_exclude_none=True)
def list_academies(db: Database = Depends(get_db)):
    return envelope(AcademyService(db).list_academies())


@router.post("", summary="Create an academy.", response_model=ApiResponse, response_model_exclude_none=True,
             status_code=status.HTTP_201_CREATED)
def create_academy(data: AcademyCreate, db: Database = Depends(get_db)):
    return envelope(AcademyService(db).create(data))


@router.get("/{academy_id}", summary="Get an academy.", response_model=ApiResponse, response_model_exclude_none=True)
def get_academy(academy_id: str, db: Database = Depends(get_db)):
    return envelope(AcademyService(db).get(academy_id))
