"""Health check endpoint."""

import time

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.db.session import DocumentStore, get_store

router = APIRouter()


@router.get("", summary="Database connectivity check.")
def health(store: DocumentStore = Depends(get_store)):
    if not store.ping():
        return JSONResponse(status_code=503, content={"status": "error", "message": "Database connection failed"})
    return {"status": "ok", "timestamp": int(time.time() * 1000)}
