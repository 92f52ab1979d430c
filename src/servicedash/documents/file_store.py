"""File-based document store.

Created: 2026-10-18
Implements DocumentStoreProtocol using JSON files.

Storage layout:
~/.servicedash/data/
    links.json               # {"links": [...]}
    links_order.json         # {"order": [...]}
    dashboard_settings.json  # title, subtitle, colors
    auth_settings.json       # isEnabled, username, password

Design notes:
- One JSON file per document, always read and written whole
- Atomic writes using temp file + rename; concurrent writers are last-writer-wins
- No in-memory cache: every read goes to disk so hand edits are picked up
"""

import json
import logging
from pathlib import Path
from typing import Any

from servicedash.documents.models import DocumentType

logger = logging.getLogger(__name__)


class FileDocumentStore:
    """One ``<doc_type>.json`` file per document under *base_path*."""

    def __init__(self, base_path: Path | None = None):
        """Initialize the store.

        Args:
            base_path: Directory for document files. Defaults to the configured data_dir.
        """
        if base_path is None:
            from servicedash.config import get_settings

            base_path = get_settings().data_dir

        self.base_path = Path(base_path)
        self.base_path.mkdir(parents=True, exist_ok=True)
        logger.debug("Data directory ensured at %s", self.base_path)

    def path_for(self, doc_type: DocumentType) -> Path:
        """File backing *doc_type*."""
        return self.base_path / f"{DocumentType(doc_type).value}.json"

    # =========================================================================
    # File I/O
    # =========================================================================

    async def read(self, doc_type: DocumentType) -> dict[str, Any] | None:
        """Load a document, returning None if its file does not exist."""
        path = self.path_for(doc_type)
        if not path.exists():
            return None
        try:
            with open(path, encoding="utf-8") as f:
                return json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.error("Error reading %s data: %s", DocumentType(doc_type).value, e)
            raise

    async def write(self, doc_type: DocumentType, document: dict[str, Any]) -> None:
        """Save a document atomically."""
        path = self.path_for(doc_type)
        temp_path = path.with_suffix(".tmp")
        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2, ensure_ascii=False)
            temp_path.replace(path)
        except OSError as e:
            logger.error("Error writing %s data: %s", DocumentType(doc_type).value, e)
            if temp_path.exists():
                temp_path.unlink()
            raise
        logger.info("%s data saved", DocumentType(doc_type).value)


# =========================================================================
# Factory Function
# =========================================================================

_store_instance: FileDocumentStore | None = None


def get_document_store(base_path: Path | None = None) -> FileDocumentStore:
    """Get or create the document store singleton.

    Args:
        base_path: Optional custom storage path. Only used on first call.

    Returns:
        The FileDocumentStore instance.
    """
    global _store_instance
    if _store_instance is None:
        _store_instance = FileDocumentStore(base_path)
    return _store_instance


def reset_document_store() -> None:
    """Reset the store singleton (for testing)."""
    global _store_instance
    _store_instance = None
