# Dashboard router: GET/PUT dashboard appearance settings.
# Created: 2026-10-18

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from servicedash.api.deps import get_store
from servicedash.api.responses import error_response
from servicedash.api.schemas.common import SuccessResponse
from servicedash.api.schemas.dashboard import DashboardSettingsModel
from servicedash.documents import (
    DashboardSettings,
    DocumentStoreProtocol,
    DocumentType,
    load_document,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Dashboard"])


@router.get("/dashboard/settings", response_model=DashboardSettingsModel)
async def get_dashboard_settings(store: DocumentStoreProtocol = Depends(get_store)):
    """Get the dashboard title, subtitle and colors."""
    try:
        settings = DashboardSettings.from_dict(
            await load_document(store, DocumentType.DASHBOARD_SETTINGS)
        )
        return DashboardSettingsModel.model_validate(settings.to_dict())
    except Exception:
        logger.exception("Failed to get dashboard settings")
        return error_response(500, "Failed to get dashboard settings")


@router.put("/dashboard/settings", response_model=SuccessResponse)
async def save_dashboard_settings(
    payload: DashboardSettingsModel, store: DocumentStoreProtocol = Depends(get_store)
):
    """Overwrite the dashboard settings wholesale."""
    try:
        await store.write(DocumentType.DASHBOARD_SETTINGS, payload.to_settings().to_dict())
    except Exception:
        logger.exception("Failed to save dashboard settings")
        return error_response(500, "Failed to save dashboard settings")
    return SuccessResponse()
