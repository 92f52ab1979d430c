"""API server for ``servicedash serve``.

Builds the FastAPI app (REST routers under ``/api``, CORS, optional front-end)
and creates the default documents on startup.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from servicedash.config import Settings, get_settings
from servicedash.documents import DocumentStoreProtocol, FileDocumentStore, ensure_default_documents

logger = logging.getLogger(__name__)


def create_api_app(
    store: DocumentStoreProtocol | None = None,
    settings: Settings | None = None,
):
    """Build the FastAPI application.

    Args:
        store: Document store to serve. Defaults to a FileDocumentStore in
            ``settings.data_dir``.
        settings: Defaults to the cached process settings.
    """
    from fastapi import FastAPI
    from fastapi.middleware.cors import CORSMiddleware

    from servicedash import __version__
    from servicedash.api.routes import mount_routers
    from servicedash.api.static import mount_frontend

    settings = settings or get_settings()
    if store is None:
        store = FileDocumentStore(settings.data_dir)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await ensure_default_documents(app.state.document_store)
        yield

    app = FastAPI(
        title="servicedash API",
        description="Services dashboard: links, appearance and shared login.",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )
    app.state.document_store = store
    app.state.links_lock = asyncio.Lock()

    # --- CORS -----------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
    )

    # --- Routers --------------------------------------------------------
    mount_routers(app)

    # --- Front-end (last: catch-all route) -------------------------------
    if settings.static_dir is not None:
        mount_frontend(app, settings.static_dir)

    return app


def run_api_server(
    host: str | None = None,
    port: int | None = None,
    data_dir: Path | None = None,
    dev: bool = False,
) -> None:
    """Start the API server with uvicorn."""
    import os

    import uvicorn

    settings = get_settings()
    host = host or settings.host
    port = port or settings.port
    if data_dir is not None:
        # Env var so the reloader's fresh process sees it too
        os.environ["SERVICEDASH_DATA_DIR"] = str(data_dir)
        get_settings.cache_clear()
        settings = get_settings()

    logger.info("Server running on port %d", port)
    logger.info("API URL: http://%s:%d/api", host, port)
    logger.info("Data directory: %s", settings.data_dir)

    if dev:
        src_dir = str(Path(__file__).resolve().parent.parent)
        uvicorn.run(
            "servicedash.api.serve:create_api_app",
            factory=True,
            host=host,
            port=port,
            reload=True,
            reload_dirs=[src_dir],
            reload_includes=["*.py"],
            log_level="debug",
        )
    else:
        app = create_api_app(settings=settings)
        uvicorn.run(app, host=host, port=port, log_level=settings.log_level.lower())
