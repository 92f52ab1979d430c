# Shared FastAPI dependencies for the API layer.
# Created: 2026-10-18

from __future__ import annotations

import asyncio

from fastapi import Request

from servicedash.documents import DocumentStoreProtocol, get_document_store


def get_store(request: Request) -> DocumentStoreProtocol:
    """Document store for the current app.

    Apps built by ``create_api_app(store=...)`` carry their own store on
    ``app.state``; otherwise the process-wide file store is used.

    Usage::

        @router.get("/links")
        async def list_links(store: DocumentStoreProtocol = Depends(get_store)): ...
    """
    store = getattr(request.app.state, "document_store", None)
    if store is None:
        store = get_document_store()
    return store


def get_links_lock(request: Request) -> asyncio.Lock:
    """Lock serializing link read-modify-write within one app."""
    lock = getattr(request.app.state, "links_lock", None)
    if lock is None:
        lock = request.app.state.links_lock = asyncio.Lock()
    return lock
