"""Document and blob persistence implementations."""

from localmemory.infrastructure.persistence.file_blob_store import FileBlobStore
from localmemory.infrastructure.persistence.file_document_store import (
    FileDocumentStore,
)

__all__ = ["FileBlobStore", "FileDocumentStore"]
