# Links router: link CRUD plus the manual sort order.
# Created: 2026-10-18
#
# Create and delete touch two documents (links, then links_order) in two
# separate writes. A crash between them leaves the order out of step with the
# links; readers treat ids missing from the order as "last" and ignore ids
# that no longer exist.

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends, Response

from servicedash.api.deps import get_links_lock, get_store
from servicedash.api.responses import error_response
from servicedash.api.schemas.common import ErrorResponse, SuccessResponse
from servicedash.api.schemas.links import (
    LinkCreateRequest,
    LinkModel,
    LinkOrderModel,
    LinksResponse,
    LinkUpdateRequest,
)
from servicedash.documents import DocumentStoreProtocol, DocumentType, Link, load_document

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Links"])

_NOT_FOUND = {404: {"model": ErrorResponse}}


def _find_index(links: list[dict], link_id: str) -> int | None:
    for index, link in enumerate(links):
        if link.get("id") == link_id:
            return index
    return None


# --- Order ------------------------------------------------------------------
# Registered before /links/{link_id} so "order" is never taken for an id.


@router.get("/links/order", response_model=LinkOrderModel)
async def get_links_order(store: DocumentStoreProtocol = Depends(get_store)):
    """Get the stored manual order."""
    try:
        return LinkOrderModel.model_validate(
            await load_document(store, DocumentType.LINKS_ORDER)
        )
    except Exception:
        logger.exception("Failed to get links order")
        return error_response(500, "Failed to get links order")


@router.put("/links/order", response_model=SuccessResponse)
async def save_links_order(
    payload: LinkOrderModel, store: DocumentStoreProtocol = Depends(get_store)
):
    """Overwrite the manual order wholesale (ids are not checked against links)."""
    try:
        await store.write(DocumentType.LINKS_ORDER, {"order": payload.order})
    except Exception:
        logger.exception("Failed to save links order")
        return error_response(500, "Failed to save links order")
    return SuccessResponse()


# --- Links ------------------------------------------------------------------


@router.get("/links", response_model=LinksResponse, response_model_exclude_none=True)
async def list_links(store: DocumentStoreProtocol = Depends(get_store)):
    """Get all links in stored (not display) order."""
    try:
        return LinksResponse.model_validate(await load_document(store, DocumentType.LINKS))
    except Exception:
        logger.exception("Failed to get links")
        return error_response(500, "Failed to get links")


@router.post(
    "/links",
    status_code=201,
    response_model=LinkModel,
    response_model_exclude_none=True,
)
async def create_link(
    payload: LinkCreateRequest,
    store: DocumentStoreProtocol = Depends(get_store),
    lock: asyncio.Lock = Depends(get_links_lock),
):
    """Append a link, then append its id to the manual order."""
    link = payload.to_link()
    try:
        async with lock:
            data = await load_document(store, DocumentType.LINKS)
            data.setdefault("links", []).append(link.to_dict())
            await store.write(DocumentType.LINKS, data)

            order_data = await load_document(store, DocumentType.LINKS_ORDER)
            order_data.setdefault("order", []).append(link.id)
            await store.write(DocumentType.LINKS_ORDER, order_data)
    except Exception:
        logger.exception("Failed to add link")
        return error_response(500, "Failed to add link")

    logger.info("Added link %s (%s)", link.id, link.name)
    return link.to_dict()


@router.put(
    "/links/{link_id}",
    response_model=LinkModel,
    response_model_exclude_none=True,
    responses=_NOT_FOUND,
)
async def update_link(
    link_id: str,
    payload: LinkUpdateRequest,
    store: DocumentStoreProtocol = Depends(get_store),
    lock: asyncio.Lock = Depends(get_links_lock),
):
    """Replace an existing link in place."""
    try:
        async with lock:
            data = await load_document(store, DocumentType.LINKS)
            links = data.setdefault("links", [])
            index = _find_index(links, link_id)
            if index is None:
                return error_response(404, "Link not found")

            updated = payload.apply_to(Link.from_dict(links[index]))
            links[index] = updated.to_dict()
            await store.write(DocumentType.LINKS, data)
    except Exception:
        logger.exception("Failed to update link %s", link_id)
        return error_response(500, "Failed to update link")

    return updated.to_dict()


@router.delete("/links/{link_id}", status_code=204, responses=_NOT_FOUND)
async def delete_link(
    link_id: str,
    store: DocumentStoreProtocol = Depends(get_store),
    lock: asyncio.Lock = Depends(get_links_lock),
):
    """Remove a link, then drop its id from the manual order."""
    try:
        async with lock:
            data = await load_document(store, DocumentType.LINKS)
            links = data.setdefault("links", [])
            index = _find_index(links, link_id)
            if index is None:
                return error_response(404, "Link not found")

            del links[index]
            await store.write(DocumentType.LINKS, data)

            order_data = await load_document(store, DocumentType.LINKS_ORDER)
            order_data["order"] = [i for i in order_data.get("order", []) if i != link_id]
            await store.write(DocumentType.LINKS_ORDER, order_data)
    except Exception:
        logger.exception("Failed to delete link %s", link_id)
        return error_response(500, "Failed to delete link")

    logger.info("Deleted link %s", link_id)
    return Response(status_code=204)
