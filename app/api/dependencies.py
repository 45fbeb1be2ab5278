"""
Shared API dependencies.

Reusable FastAPI dependencies for authentication and the per-process
response caches. The database handle comes from ``app.db.session.get_db``.
"""

from typing import Optional

from fastapi import Depends, Request

from app.core.cache import ResponseCache
from app.core.errors import AuthenticationError
from app.core.security import decode_access_token, oauth2_scheme


def get_player_cache(request: Request) -> ResponseCache:
    return request.app.state.player_cache


def get_session_cache(request: Request) -> ResponseCache:
    return request.app.state.session_cache


def get_current_claims(token: Optional[str] = Depends(oauth2_scheme)) -> dict:
    """Extract and validate the caller's claims from the bearer token."""
    claims = decode_access_token(token) if token else None
    if not claims or not claims.get("sub"):
        raise AuthenticationError("Invalid or expired token")
    return claims
