"""Document store protocol.

Created: 2026-10-18
Defines the interface for document storage backends.

Handlers and bootstrap code only see this protocol, so the backing can be
swapped without touching them:
- FileDocumentStore: one JSON file per document (default)
- InMemoryDocumentStore: dict-backed, for tests and embedding
"""

from typing import Any, Protocol, runtime_checkable

from servicedash.documents.models import DocumentType


@runtime_checkable
class DocumentStoreProtocol(Protocol):
    """Whole-document read/write. There is no field-level update and no locking."""

    async def read(self, doc_type: DocumentType) -> dict[str, Any] | None:
        """Return the stored document, or None when it does not exist."""
        ...

    async def write(self, doc_type: DocumentType, document: dict[str, Any]) -> None:
        """Replace the stored document. Raises OSError on failure."""
        ...
