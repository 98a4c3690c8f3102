"""
Infrastructure Builder

Wires the file-based stores into application services from the server
settings, so that the API and CLI layers never construct infrastructure
adapters themselves.
"""

from __future__ import annotations

import structlog

from localmemory.application.document_service import DocumentService
from localmemory.application.settings import ServerSettings
from localmemory.infrastructure.persistence.file_blob_store import FileBlobStore
from localmemory.infrastructure.persistence.file_document_store import (
    FileDocumentStore,
)

logger = structlog.get_logger(__name__)


class InfrastructureBuilder:
    """Builder for storage adapters and the services that use them."""

    def __init__(self, settings: ServerSettings) -> None:
        self._settings = settings

    def build_document_store(self) -> FileDocumentStore:
        """One JSON record per document under the data directory."""
        return FileDocumentStore(data_dir=self._settings.data_dir)

    def build_blob_store(self) -> FileBlobStore:
        """Uploaded files under the files directory."""
        return FileBlobStore(files_dir=self._settings.files_dir)

    def build_document_service(self) -> DocumentService:
        """Document service over file-based stores."""
        logger.debug(
            "infrastructure.document_service",
            data_dir=str(self._settings.data_dir),
            files_dir=str(self._settings.files_dir),
        )
        return DocumentService(
            store=self.build_document_store(),
            blobs=self.build_blob_store(),
        )
