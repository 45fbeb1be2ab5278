"""
User endpoints.

Academy users and their profile details.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from pymongo.database import Database

from app.api.responses import envelope
from app.db.session import get_db
from app.models.user import Role
from app.schemas.common import ApiResponse
from app.schemas.user import UserCreate, UserUpdate
from app.schemas.user_info import UserInfoUpsert
from app.services.user_info_service import UserInfoService
from app.services.user_service import UserService

router = APIRouter()
info_router = APIRouter()


@router.get("", summary="List users of an academy.", response_model=ApiResponse, response_model_exclude_none=True)
def list_users(academyId: str = Query(..., min_length=1), role: Optional[Role] = Query(None),
               db: Database = Depends(get_db)):
    return envelope(UserService(db).list_users(academyId, role))


@router.post("", summary="Create a user.", response_model=ApiResponse, response_model_exclude_none=True,
             status_code=status.HTTP_201_CREATED)
def create_user(data: UserCreate, db: Database = Depends(get_db)):
    return envelope(UserService(db).register(data))


@router.get("/{user_id}", summary="Get a user by id or username.", response_model=ApiResponse,
            response_model_exclude_none=True)
def get_user(user_id: str, db: Database = Depends(get_db)):
    return envelope(UserService(db).get_user(user_id))


@router.patch("/{user_id}", summary="Update a user.", response_model=ApiResponse, response_model_exclude_none=True)
def update_user(user_id: str, data: UserUpdate, db: Database = Depends(get_db)):
    return envelope(UserService(db).update_user(user_id, data))


@router.delete("/{user_id}", summary="Deactivate a user.", response_model=ApiResponse,
               response_model_exclude_none=True)
def delete_user(user_id: str, db: Database = Depends(get_db)):
    UserService(db).delete_user(user_id)
    return envelope()


@info_router.get("", summary="Get profile details.", response_model=ApiResponse, response_model_exclude_none=True)
def get_user_info(userId: str = Query(..., min_length=1), academyId: Optional[str] = Query(None),
                  db: Database = Depends(get_db)):
    return envelope(UserInfoService(db).get(userId, academyId))


@info_router.post("", summary="Create or update profile details.", response_model=ApiResponse,
                  response_model_exclude_none=True)
def upsert_user_info(data: UserInfoUpsert, db: Database = Depends(get_db)):
    return envelope(UserInfoService(db).upsert(data))
