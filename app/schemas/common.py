"""Shared API schemas."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class ApiResponse(BaseModel):
    """Uniform response envelope."""

    model_config = ConfigDict(extra="allow")

    success: bool = True
    data: Any = None
    error: Optional[str] = None


class Document(BaseModel):
    """Base for payloads stored as-is: unknown fields are kept."""

    model_config = ConfigDict(extra="allow")

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class Patch(BaseModel):
    """Base for partial updates: only named fields are accepted."""

    model_config = ConfigDict(extra="ignore")

    def changes(self) -> dict[str, Any]:
        """Fields the caller actually sent."""
        return self.model_dump(mode="json", exclude_unset=True)
