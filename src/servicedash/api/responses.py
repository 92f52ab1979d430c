# Error envelopes shared by the route handlers.
# Created: 2026-10-18

from __future__ import annotations

from fastapi.responses import JSONResponse


def error_response(status_code: int, message: str) -> JSONResponse:
    """``{"error": message}`` with *status_code*. Never carries exception detail."""
    return JSONResponse(status_code=status_code, content={"error": message})
