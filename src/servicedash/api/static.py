# Front-end hosting: serves a built single-page app next to the API.
# Created: 2026-10-18
#
# Files under static_dir are served as-is; any other non-API GET falls back to
# index.html so client-side routes survive a reload.

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import FileResponse

from servicedash.api.responses import error_response
from servicedash.api.routes import API_PREFIX

logger = logging.getLogger(__name__)


def mount_frontend(app: FastAPI, static_dir: Path) -> bool:
    """Register the catch-all front-end route. Must run after the API routers.

    Returns False (and mounts nothing) when *static_dir* is not a directory.
    """
    root = Path(static_dir).resolve()
    if not root.is_dir():
        logger.warning("Static directory %s not found; front-end not served", root)
        return False

    index = root / "index.html"
    api_root = API_PREFIX.strip("/")

    @app.get("/{full_path:path}", include_in_schema=False)
    async def serve_frontend(full_path: str):
        if full_path == api_root or full_path.startswith(f"{api_root}/"):
            return error_response(404, "Not found")

        if full_path:
            candidate = (root / full_path).resolve()
            if candidate.is_relative_to(root) and candidate.is_file():
                return FileResponse(candidate)

        if index.is_file():
            return FileResponse(index)
        return error_response(404, "Not found")

    logger.info("Serving front-end from %s", root)
    return True
