"""Persistence for the dashboard's four JSON documents.

Usage:
    from servicedash.documents import DocumentType, get_document_store

    store = get_document_store()
    await ensure_default_documents(store)
    links = await store.read(DocumentType.LINKS)
"""

from servicedash.documents.defaults import (
    default_document,
    ensure_default_documents,
    load_document,
)
from servicedash.documents.file_store import (
    FileDocumentStore,
    get_document_store,
    reset_document_store,
)
from servicedash.documents.memory_store import InMemoryDocumentStore
from servicedash.documents.models import (
    AUTH_DISABLED_TOKEN,
    PASSWORD_MASK,
    AuthSettings,
    DashboardSettings,
    DocumentType,
    Link,
    generate_id,
    next_timestamp,
    now_ms,
)
from servicedash.documents.protocol import DocumentStoreProtocol

__all__ = [
    "AUTH_DISABLED_TOKEN",
    "PASSWORD_MASK",
    "AuthSettings",
    "DashboardSettings",
    "DocumentStoreProtocol",
    "DocumentType",
    "FileDocumentStore",
    "InMemoryDocumentStore",
    "Link",
    "default_document",
    "ensure_default_documents",
    "generate_id",
    "get_document_store",
    "load_document",
    "next_timestamp",
    "now_ms",
    "reset_document_store",
]
