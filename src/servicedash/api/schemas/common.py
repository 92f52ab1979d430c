# Common API response schemas.
# Created: 2026-10-18

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class APIModel(BaseModel):
    """Base model: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(populate_by_name=True)


class ErrorResponse(APIModel):
    """Standard error envelope."""

    error: str


class SuccessResponse(APIModel):
    """Simple success response."""

    success: bool = True
