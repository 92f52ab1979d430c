# API router aggregation.
# Created: 2026-10-18
#
# mount_routers(app) registers every domain router under /api.

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastapi import FastAPI

logger = logging.getLogger(__name__)

API_PREFIX = "/api"

# Domain routers: imported lazily inside mount_routers().
_ROUTERS: list[tuple[str, str, str]] = [
    # (module_path, attr_name, tag)
    ("servicedash.api.routes.dashboard", "router", "Dashboard"),
    ("servicedash.api.routes.links", "router", "Links"),
    ("servicedash.api.routes.auth", "router", "Auth"),
]


def mount_routers(app: FastAPI) -> None:
    """Mount all domain routers on *app* at ``/api``."""
    import importlib

    from fastapi import APIRouter

    for module_path, attr_name, tag in _ROUTERS:
        mod = importlib.import_module(module_path)
        router: APIRouter = getattr(mod, attr_name)
        app.include_router(router, prefix=API_PREFIX)
        logger.debug("Mounted router: %s (%s)", module_path, tag)
