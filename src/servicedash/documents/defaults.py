"""Default documents and first-run initialization."""

import logging
from typing import Any

from servicedash.documents.models import AuthSettings, DashboardSettings, DocumentType
from servicedash.documents.protocol import DocumentStoreProtocol

logger = logging.getLogger(__name__)


def default_document(doc_type: DocumentType) -> dict[str, Any]:
    """A fresh copy of the default value for *doc_type*."""
    doc_type = DocumentType(doc_type)
    if doc_type is DocumentType.LINKS:
        return {"links": []}
    if doc_type is DocumentType.LINKS_ORDER:
        return {"order": []}
    if doc_type is DocumentType.DASHBOARD_SETTINGS:
        return DashboardSettings().to_dict()
    return AuthSettings().to_dict()


async def load_document(store: DocumentStoreProtocol, doc_type: DocumentType) -> dict[str, Any]:
    """Read a document, substituting its default when it does not exist yet."""
    document = await store.read(doc_type)
    if document is None:
        return default_document(doc_type)
    return document


async def ensure_default_documents(store: DocumentStoreProtocol) -> list[DocumentType]:
    """Write the default for every document that does not exist yet.

    Failures are logged per document and do not stop the others.

    Returns:
        The document types that were initialized.
    """
    initialized: list[DocumentType] = []
    for doc_type in DocumentType:
        try:
            if await store.read(doc_type) is None:
                await store.write(doc_type, default_document(doc_type))
                initialized.append(doc_type)
                logger.info("Initialized %s with default data", doc_type.value)
        except (OSError, ValueError):
            logger.exception("Error initializing %s", doc_type.value)
    return initialized
