"""
Authentication endpoints.

Handles login and the owner account bootstrap.
"""

from fastapi import APIRouter, Depends
from pymongo.database import Database

from app.api.dependencies import get_current_claims
from app.api.responses import envelope
from app.core.errors import NotFoundError
from app.db.session import get_db
from app.schemas.common import ApiResponse
from app.schemas.user import LoginRequest
from app.services.user_service import UserService

router = APIRouter()


@router.post("/login", summary="User login endpoint via JSON.", response_model=ApiResponse,
             response_model_exclude_none=True)
def login(login_data: LoginRequest, db: Database = Depends(get_db)):
    """
    Authenticate a user (or the owner) by username and password.

    Returns:
        JWT access token and the public user record
    """
    token, user = UserService(db).authenticate(login_data)
    return envelope({"user": user, **token.model_dump()})


@router.post("/owner/init", summary="Create the owner account from configuration.", response_model=ApiResponse,
             response_model_exclude_none=True)
def init_owner(db: Database = Depends(get_db)):
    owner, created = UserService(db).init_owner()
    return envelope({"owner": owner, "created": created})


@router.get("/me", summary="Current user info.", response_model=ApiResponse, response_model_exclude_none=True)
def me(claims: dict = Depends(get_current_claims), db: Database = Depends(get_db)):
    user = UserService(db).get_user_by_username(claims["sub"])
    if user is None:
        raise NotFoundError("User not found")
    return envelope(user)
