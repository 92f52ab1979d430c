# Auth router: shared-login settings, login, token check.
# Created: 2026-10-18
#
# There is one username/password pair, stored in plaintext, and tokens are
# just the login timestamp. Any non-empty token verifies while auth is on.

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from servicedash.api.deps import get_store
from servicedash.api.responses import error_response
from servicedash.api.schemas.auth import (
    AuthSettingsModel,
    LoginFailedResponse,
    LoginRequest,
    LoginResponse,
    VerifyRequest,
    VerifyResponse,
)
from servicedash.api.schemas.common import SuccessResponse
from servicedash.documents import (
    AUTH_DISABLED_TOKEN,
    PASSWORD_MASK,
    AuthSettings,
    DocumentStoreProtocol,
    DocumentType,
    load_document,
    now_ms,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])


async def _load_auth_settings(store: DocumentStoreProtocol) -> AuthSettings:
    return AuthSettings.from_dict(await load_document(store, DocumentType.AUTH_SETTINGS))


@router.get("/auth/settings", response_model=AuthSettingsModel)
async def get_auth_settings(store: DocumentStoreProtocol = Depends(get_store)):
    """Get auth settings with the password masked."""
    try:
        settings = await _load_auth_settings(store)
        return AuthSettingsModel.model_validate(settings.masked())
    except Exception:
        logger.exception("Failed to get auth settings")
        return error_response(500, "Failed to get auth settings")


@router.put("/auth/settings", response_model=SuccessResponse)
async def save_auth_settings(
    payload: AuthSettingsModel, store: DocumentStoreProtocol = Depends(get_store)
):
    """Save auth settings. A masked password keeps the stored one."""
    try:
        password = payload.password
        if password == PASSWORD_MASK:
            password = (await _load_auth_settings(store)).password

        settings = AuthSettings(
            is_enabled=payload.is_enabled,
            username=payload.username,
            password=password,
        )
        await store.write(DocumentType.AUTH_SETTINGS, settings.to_dict())
    except Exception:
        logger.exception("Failed to save auth settings")
        return error_response(500, "Failed to save auth settings")
    return SuccessResponse()


@router.post(
    "/auth/login",
    response_model=LoginResponse,
    responses={401: {"model": LoginFailedResponse}},
)
async def login(payload: LoginRequest, store: DocumentStoreProtocol = Depends(get_store)):
    """Check credentials and hand out a token."""
    try:
        settings = await _load_auth_settings(store)
    except Exception:
        logger.exception("Login failed")
        return error_response(500, "Login failed")

    if not settings.is_enabled:
        return LoginResponse(success=True, token=AUTH_DISABLED_TOKEN)

    if settings.check_credentials(payload.username, payload.password):
        return LoginResponse(success=True, token=str(now_ms()))

    logger.warning("Rejected login for user %r", payload.username)
    return JSONResponse(status_code=401, content=LoginFailedResponse().model_dump())


@router.post("/auth/verify", response_model=VerifyResponse)
async def verify(payload: VerifyRequest, store: DocumentStoreProtocol = Depends(get_store)):
    """Token check: always valid with auth off, otherwise any non-empty token."""
    try:
        settings = await _load_auth_settings(store)
    except Exception:
        logger.exception("Token verification failed")
        return error_response(500, "Token verification failed")

    if not settings.is_enabled:
        return VerifyResponse(valid=True)
    return VerifyResponse(valid=bool(payload.token))
