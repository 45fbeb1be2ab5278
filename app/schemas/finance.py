"""Finance schemas."""

from typing import Optional

from pydantic import BaseModel, Field

from app.models.finance import TransactionStatus


class TransactionCreate(BaseModel):
    academyId: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1, description="e.g. income or expense")
    amount: float = Field(..., gt=0)
    description: Optional[str] = None
    date: Optional[str] = None
    documentUrl: Optional[str] = None


class TransactionStatusUpdate(BaseModel):
    status: TransactionStatus


class FinanceDocumentCreate(BaseModel):
    academyId: str = Field(..., min_length=1)
    filename: str = Field(..., min_length=1)
    contentType: str = Field("application/octet-stream", min_length=1)
    data: str = Field(..., min_length=1, description="base64 encoded file content")
