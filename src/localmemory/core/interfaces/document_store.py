"""
Document Storage Protocols

This module defines the protocol interfaces for document and blob
persistence. The application layer depends only on these protocols, so the
one-file-per-record implementation can be replaced by an embedded key-value
engine without touching callers.
"""

from typing import Protocol

from localmemory.core.domain.document import Document


class DocumentStoreProtocol(Protocol):
    """
    Protocol defining the contract for keyed document persistence.

    Error Handling:
        - get: Raises NotFoundError if the id is unknown or the record is corrupt
        - put: Propagates OSError on write failure
        - delete: Raises NotFoundError if the id is unknown
        - list_all: Skips (and logs) records that fail to load

    Concurrency:
        ``lock`` returns a per-id lock that callers hold for the whole of a
        read-merge-write cycle.
    """

    async def get(self, document_id: str) -> Document:
        """Load a document by id."""
        ...

    async def put(self, document: Document) -> Document:
        """Persist a document, replacing any existing record with its id."""
        ...

    async def delete(self, document_id: str) -> None:
        """Remove a document record."""
        ...

    async def list_all(self) -> list[Document]:
        """Load every readable document, newest first."""
        ...

    def lock(self, document_id: str):
        """Return an async context manager serializing writers of one id."""
        ...


class BlobStoreProtocol(Protocol):
    """Protocol for write-once binary storage."""

    async def store(self, document_id: str, file_name: str, data: bytes) -> str:
        """
        Write ``data`` under ``<document_id>-<file_name>``.

        Returns:
            The storage path of the written blob.
        """
        ...
