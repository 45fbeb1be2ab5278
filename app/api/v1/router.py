"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import academies, attendance, auth, batches, coaches, finance, health, players, sessions, users

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    health.router, prefix="/health", tags=["Health"]
)
api_router.include_router(
    auth.router, prefix="/auth", tags=["Authentication"]
)
api_router.include_router(
    users.router, prefix="/users", tags=["Users"]
)
api_router.include_router(
    users.info_router, prefix="/user-info", tags=["Users"]
)
api_router.include_router(
    academies.router, prefix="/academies", tags=["Academies"]
)
api_router.include_router(
    players.router, prefix="/players", tags=["Players"]
)
api_router.include_router(
    coaches.router, prefix="/coaches", tags=["Coaches"]
)
api_router.include_router(
    sessions.router, prefix="/sessions", tags=["Training sessions"]
)
api_router.include_router(
    attendance.router, prefix="/attendance", tags=["Attendance"]
)
api_router.include_router(
    batches.router, prefix="/batches", tags=["Batches"]
)
api_router.include_router(
    finance.router, prefix="/finance", tags=["Finance"]
)
api_router.include_router(
    finance.docs_router, prefix="/docs", tags=["Finance"]
)
