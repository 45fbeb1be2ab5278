"""Batch endpoints."""

from fastapi import APIRouter, Depends, Query, status
from pymongo.database import Database

from app.api.responses import envelope
from app.db.session import get_db
from app.schemas.batch import BatchCreate, BatchDelete, BatchUpdate
from app.schemas.common import ApiResponse
from app.services.batch_service import BatchService

router = APIRouter()


@router.get("", summary="List batches of an academy with coach names.", response_model=ApiResponse,
            response_model_exclude_none=True)
def list_batches(academyId: str = Query(..., min_length=1), db: Database = Depends(get_db)):
    return envelope(BatchService(db).list_batches(academyId))


@router.post("", summary="Create a batch.", response_model=ApiResponse, response_model_exclude_none=True,
             status_code=status.HTTP_201_CREATED)
def create_batch(data: BatchCreate, db: Database = Depends(get_db)):
    return envelope(BatchService(db).create_batch(data))


@router.post("/delete", summary="Permanently delete batches by id.", response_model=ApiResponse,
             response_model_exclude_none=True)
def delete_batches(data: BatchDelete, db: Database = Depends(get_db)):
    return envelope({"deletedCount": BatchService(db).delete_batches(data.batchIds)})


@router.get("/{batch_id}", summary="Get a batch.", response_model=ApiResponse, response_model_exclude_none=True)
def get_batch(batch_id: str, db: Database = Depends(get_db)):
    return envelope(BatchService(db).get_batch(batch_id))


@router.patch("/{batch_id}", summary="Update a batch.", response_model=ApiResponse, response_model_exclude_none=True)
def update_batch(batch_id: str, data: BatchUpdate, db: Database = Depends(get_db)):
    return envelope(BatchService(db).update_batch(batch_id, data))
