"""
Finance endpoints.

Transactions plus uploaded finance documents. ``docs_router`` serves the
raw document bytes for inline viewing.
"""

from fastapi import APIRouter, Depends, Query, Response, status
from pymongo.database import Database

from app.api.responses import NO_CACHE_HEADERS, envelope
from app.db.session import get_db
from app.schemas.common import ApiResponse
from app.schemas.finance import FinanceDocumentCreate, TransactionCreate, TransactionStatusUpdate
from app.services.finance_service import FinanceService

router = APIRouter()
docs_router = APIRouter()


@router.get("", summary="List finance transactions.", response_model=ApiResponse, response_model_exclude_none=True)
def list_transactions(academyId: str = Query(..., min_length=1), db: Database = Depends(get_db)):
    return envelope(FinanceService(db).list_transactions(academyId))


@router.post("", summary="Record a transaction.", response_model=ApiResponse, response_model_exclude_none=True,
             status_code=status.HTTP_201_CREATED)
def create_transaction(data: TransactionCreate, db: Database = Depends(get_db)):
    return envelope(FinanceService(db).create_transaction(data))


@router.get("/documents", summary="List uploaded finance documents.", response_model=ApiResponse,
            response_model_exclude_none=True)
def list_documents(academyId: str = Query(..., min_length=1), db: Database = Depends(get_db)):
    return envelope(FinanceService(db).list_documents(academyId))


@router.post("/documents", summary="Upload a finance document.", response_model=ApiResponse,
             response_model_exclude_none=True, status_code=status.HTTP_201_CREATED)
def upload_document(data: FinanceDocumentCreate, db: Database = Depends(get_db)):
    return envelope(FinanceService(db).upload_document(data))


@router.patch("/{transaction_id}", summary="Change a transaction status.", response_model=ApiResponse,
              response_model_exclude_none=True)
def update_transaction(transaction_id: str, data: TransactionStatusUpdate, db: Database = Depends(get_db)):
    return envelope(FinanceService(db).update_status(transaction_id, data.status))


@router.delete("/{transaction_id}", summary="Mark a transaction as deleted.", response_model=ApiResponse,
               response_model_exclude_none=True)
def delete_transaction(transaction_id: str, db: Database = Depends(get_db)):
    FinanceService(db).delete_transaction(transaction_id)
    return envelope()


@docs_router.get("/{document_id}", summary="Download a finance document.", response_class=Response)
def get_document(document_id: str, db: Database = Depends(get_db)):
    content, content_type, filename = FinanceService(db).get_document_file(document_id)
    headers = {**NO_CACHE_HEADERS, "Content-Disposition": f'inline; filename="{filename}"'}
    return Response(content=content, media_type=content_type, headers=headers)
