"""
Document Service
================

Application-level operations over documents: create, upload, get, update,
delete and the paginated/filtered listing.

The service owns the rules that span both stores (an upload writes the blob
first, then the record that references it) and the read-merge-write cycle of
updates. It depends on the storage protocols only.

Update semantics:
    Top-level fields supplied in an update replace the stored values, while
    the ``metadata`` mapping is merged key by key. Callers relying on
    replacing metadata wholesale must send every key they want to keep.
"""

from __future__ import annotations

from typing import Any

import structlog

from localmemory.core.domain.document import Document, new_document_id
from localmemory.core.domain.errors import ValidationError
from localmemory.core.domain.query import DocumentPage, filter_by_ids, query_documents
from localmemory.core.interfaces.document_store import (
    BlobStoreProtocol,
    DocumentStoreProtocol,
)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

DEFAULT_MIME_TYPE = "application/octet-stream"


class DocumentService:
    """Document operations on top of a record store and a blob store.

    Args:
        store: Keyed document persistence.
        blobs: Write-once storage for uploaded files.
    """

    def __init__(self, store: DocumentStoreProtocol, blobs: BlobStoreProtocol) -> None:
        self._store = store
        self._blobs = blobs
        self._logger = structlog.get_logger(__name__).bind(component="document_service")

    async def create(
        self,
        content: str,
        container_tags: list[str] | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> Document:
        """Create a note or link document from text content."""
        document = Document.from_content(content, container_tags, metadata)
        await self._store.put(document)
        self._logger.info(
            "document.created", document_id=document.id, type=document.type.value
        )
        return document

    async def create_from_upload(
        self,
        file_bytes: bytes | None,
        file_name: str,
        *,
        file_size: int | None = None,
        mime_type: str | None = None,
        container_tags: list[str] | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> Document:
        """Store an uploaded file and create the document referencing it.

        Raises:
            ValidationError: If no file payload was supplied.
        """
        if file_bytes is None:
            raise ValidationError("No file uploaded")

        document_id = new_document_id()
        local_path = await self._blobs.store(document_id, file_name, file_bytes)
        document = Document.from_upload(
            document_id,
            file_name=file_name,
            file_size=len(file_bytes) if file_size is None else file_size,
            mime_type=mime_type or DEFAULT_MIME_TYPE,
            local_path=local_path,
            container_tags=container_tags,
            metadata=metadata,
        )
        await self._store.put(document)
        self._logger.info(
            "document.uploaded",
            document_id=document.id,
            file_name=file_name,
            file_size=document.metadata["fileSize"],
        )
        return document

    async def get(self, document_id: str) -> Document:
        """Return a document or raise NotFoundError."""
        return await self._store.get(document_id)

    async def update(self, document_id: str, changes: dict[str, Any]) -> Document:
        """Merge ``changes`` into a stored document and persist it.

        Raises:
            NotFoundError: If the document does not exist.
            ValidationError: If a change makes the record malformed.
        """
        async with self._store.lock(document_id):
            current = await self._store.get(document_id)
            try:
                updated = current.merged_with(changes)
            except ValueError as exc:
                raise ValidationError(
                    f"Invalid document fields: {exc}", details={"id": document_id}
                ) from exc
            await self._store.put(updated)
        self._logger.info(
            "document.updated", document_id=document_id, fields=sorted(changes)
        )
        return updated

    async def delete(self, document_id: str) -> None:
        """Delete a document record. Its uploaded blob, if any, is kept.

        Raises:
            NotFoundError: If the document does not exist.
        """
        async with self._store.lock(document_id):
            await self._store.delete(document_id)
        self._logger.info("document.deleted", document_id=document_id)

    async def list_all(self) -> list[Document]:
        """Every readable document, newest first."""
        return await self._store.list_all()

    async def query(
        self,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
        container_tags: list[str] | None = None,
    ) -> DocumentPage:
        """Return one page of documents, optionally filtered by container tags."""
        documents = await self._store.list_all()
        return query_documents(documents, page, limit, container_tags)

    async def query_by_ids(self, ids: list[str]) -> list[Document]:
        """Documents whose id is in ``ids``, in newest-first order."""
        return filter_by_ids(await self._store.list_all(), ids)
