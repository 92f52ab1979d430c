# Auth schemas.
# Created: 2026-10-18

from __future__ import annotations

from pydantic import Field

from servicedash.api.schemas.common import APIModel


class AuthSettingsModel(APIModel):
    """Shared-login settings. On reads the password is masked."""

    is_enabled: bool = Field(default=False, alias="isEnabled")
    username: str = ""
    password: str = ""


class LoginRequest(APIModel):
    username: str = ""
    password: str = ""


class LoginResponse(APIModel):
    success: bool
    token: str


class LoginFailedResponse(APIModel):
    success: bool = False
    message: str = "Invalid credentials"


class VerifyRequest(APIModel):
    token: str | None = None


class VerifyResponse(APIModel):
    valid: bool
