"""In-memory document store.

Created: 2026-10-18
Dict-backed DocumentStoreProtocol implementation. Documents are deep-copied on
the way in and out so callers never share state with the store.
"""

import copy
import logging
from typing import Any

from servicedash.documents.models import DocumentType

logger = logging.getLogger(__name__)


class InMemoryDocumentStore:
    """Keeps documents in a dict; nothing survives the process."""

    def __init__(self, documents: dict[DocumentType, dict[str, Any]] | None = None):
        self._documents: dict[DocumentType, dict[str, Any]] = copy.deepcopy(documents or {})

    async def read(self, doc_type: DocumentType) -> dict[str, Any] | None:
        document = self._documents.get(DocumentType(doc_type))
        return copy.deepcopy(document) if document is not None else None

    async def write(self, doc_type: DocumentType, document: dict[str, Any]) -> None:
        self._documents[DocumentType(doc_type)] = copy.deepcopy(document)
        logger.debug("%s data saved (memory)", DocumentType(doc_type).value)
