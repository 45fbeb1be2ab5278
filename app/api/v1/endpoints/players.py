"""
Player endpoints.

Profiles, metric updates and performance history.
"""

from fastapi import APIRouter, Depends, Query, status
from pymongo.database import Database

from app.api.dependencies import get_player_cache
from app.api.responses import envelope
from app.core.cache import ResponseCache
from app.db.session import get_db
from app.models.player import RECENT_PERFORMANCE_WINDOW
from app.schemas.common import ApiResponse
from app.schemas.player import MatchPointsUpdate, PlayerCreate, PlayerMetricsUpdate, PlayerStatsUpdate, PlayerUpdate
from app.services.player_service import PlayerService

router = APIRouter()


def get_service(db: Database = Depends(get_db), cache: ResponseCache = Depends(get_player_cache)) -> PlayerService:
    return PlayerService(db, cache)


@router.get("", summary="List players of an academy.", response_model=ApiResponse, response_model_exclude_none=True)
def list_players(academyId: str = Query(..., min_length=1), service: PlayerService = Depends(get_service)):
    return envelope(service.list_players(academyId))


@router.post("", summary="Create a player profile.", response_model=ApiResponse, response_model_exclude_none=True,
             status_code=status.HTTP_201_CREATED)
def create_player(data: PlayerCreate, service: PlayerService = Depends(get_service)):
    return envelope(service.create_player(data))


@router.get("/batch", summary="Get player summaries for a comma-separated id list.", response_model=ApiResponse,
            response_model_exclude_none=True)
def get_players_batch(ids: str = Query(..., min_length=1, description="Comma-separated player ids"),
                      service: PlayerService = Depends(get_service)):
    player_ids = [i.strip() for i in ids.split(",") if i.strip()]
    return envelope(service.get_players_batch(player_ids))


@router.get("/{player_id}", summary="Get a player.", response_model=ApiResponse, response_model_exclude_none=True)
def get_player(player_id: str, service: PlayerService = Depends(get_service)):
    return envelope(service.get_player(player_id))


@router.patch("/{player_id}", summary="Update a player profile.", response_model=ApiResponse,
              response_model_exclude_none=True)
def update_player(player_id: str, data: PlayerUpdate, service: PlayerService = Depends(get_service)):
    return envelope(service.update_player(player_id, data))


@router.delete("/{player_id}", summary="Deactivate a player.", response_model=ApiResponse,
               response_model_exclude_none=True)
def delete_player(player_id: str, service: PlayerService = Depends(get_service)):
    service.delete_player(player_id)
    return envelope()


@router.patch("/{player_id}/metrics", summary="Record session metrics for a player.", response_model=ApiResponse,
              response_model_exclude_none=True)
def update_metrics(player_id: str, data: PlayerMetricsUpdate, service: PlayerService = Depends(get_service)):
    service.record_session_metrics(player_id, data.sessionId, data.metrics)
    return envelope()


@router.patch("/{player_id}/stats", summary="Accumulate match stats.", response_model=ApiResponse,
              response_model_exclude_none=True)
def update_stats(player_id: str, data: PlayerStatsUpdate, service: PlayerService = Depends(get_service)):
    service.record_match_stats(player_id, data.matchId, data.stats)
    return envelope()


@router.patch("/{player_id}/match-points", summary="Set match points.", response_model=ApiResponse,
              response_model_exclude_none=True)
def update_match_points(player_id: str, data: MatchPointsUpdate, service: PlayerService = Depends(get_service)):
    service.record_match_points(player_id, data.matchId, data.points, data.previousPoints)
    return envelope()


@router.get("/{player_id}/performance", summary="Most recent performance entries.", response_model=ApiResponse,
            response_model_exclude_none=True)
def get_performance(player_id: str, limit: int = Query(RECENT_PERFORMANCE_WINDOW, ge=1, le=100),
                    service: PlayerService = Depends(get_service)):
    return envelope(service.get_performance(player_id, limit))
