"""
Document API Routes
===================

HTTP endpoints for documents (the client calls them "memories").

Endpoints (mounted under ``/v3``):
- POST /documents/documents - Paginated, tag-filtered listing
- POST /documents/documents/by-ids - Fetch several documents by id
- POST /documents - Add a note or link
- POST /documents/file - Upload a file (multipart)
- GET /documents/{document_id} - Get one document
- PATCH /documents/{document_id} - Merge-update a document
- DELETE /documents/{document_id} - Delete a document
"""

import json
from typing import Any

from fastapi import APIRouter, Depends, File, Form, UploadFile

from localmemory.api.dependencies import get_document_service
from localmemory.api.errors import domain_http_exception
from localmemory.api.schemas.document_schemas import (
    CreateDocumentRequest,
    DeleteDocumentResponse,
    DocumentsByIdsRequest,
    ListDocumentsRequest,
    UpdateDocumentRequest,
)
from localmemory.application.document_service import DocumentService
from localmemory.core.domain.errors import LocalMemoryError, ValidationError

router = APIRouter(prefix="/documents")


def _parse_json_field(raw: str | None, name: str, expected: type, default: Any) -> Any:
    """Decode a JSON-encoded multipart form field.

    Raises:
        ValidationError: If the field is not valid JSON of the expected type.
    """
    if not raw:
        return default
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValidationError(
            f"{name} must be a JSON-encoded {expected.__name__}",
            details={"field": name},
        ) from exc
    if not isinstance(value, expected):
        raise ValidationError(
            f"{name} must be a JSON-encoded {expected.__name__}",
            details={"field": name},
        )
    return value


@router.post("/documents", summary="List documents")
async def list_documents(
    body: ListDocumentsRequest,
    service: DocumentService = Depends(get_document_service),
) -> dict[str, Any]:
    """Return one page of documents, newest first."""
    try:
        page = await service.query(
            page=body.page, limit=body.limit, container_tags=body.container_tags
        )
    except LocalMemoryError as exc:
        raise domain_http_exception(exc) from exc
    return page.to_dict()


@router.post("/documents/by-ids", summary="Get documents by id")
async def list_documents_by_ids(
    body: DocumentsByIdsRequest,
    service: DocumentService = Depends(get_document_service),
) -> dict[str, Any]:
    """Return the documents whose ids were requested, newest first."""
    documents = await service.query_by_ids(body.ids)
    return {"documents": [doc.to_dict() for doc in documents]}


@router.post("", summary="Add document")
async def create_document(
    body: CreateDocumentRequest,
    service: DocumentService = Depends(get_document_service),
) -> dict[str, Any]:
    """Create a note, or a link when the content starts with ``http``."""
    document = await service.create(
        body.content, container_tags=body.container_tags, metadata=body.metadata
    )
    return document.to_dict()


@router.post("/file", summary="Upload file")
async def upload_document(
    file: UploadFile | None = File(None),
    container_tags: str | None = Form(None, alias="containerTags"),
    metadata: str | None = Form(None),
    service: DocumentService = Depends(get_document_service),
) -> dict[str, Any]:
    """Store an uploaded file and create a ``file`` document for it.

    ``containerTags`` and ``metadata`` arrive as JSON-encoded form fields.
    """
    try:
        if file is None:
            raise ValidationError("No file uploaded")
        tags = _parse_json_field(container_tags, "containerTags", list, [])
        if not all(isinstance(tag, str) for tag in tags):
            raise ValidationError(
                "containerTags must be a JSON-encoded list of strings",
                details={"field": "containerTags"},
            )
        extra_metadata = _parse_json_field(metadata, "metadata", dict, {})
        data = await file.read()
        document = await service.create_from_upload(
            data,
            file.filename or "upload",
            file_size=file.size,
            mime_type=file.content_type,
            container_tags=tags,
            metadata=extra_metadata,
        )
    except LocalMemoryError as exc:
        raise domain_http_exception(exc) from exc
    finally:
        if file is not None:
            await file.close()
    return document.to_dict()


@router.get("/{document_id}", summary="Get document")
async def get_document(
    document_id: str,
    service: DocumentService = Depends(get_document_service),
) -> dict[str, Any]:
    """Return a single document."""
    try:
        document = await service.get(document_id)
    except LocalMemoryError as exc:
        raise domain_http_exception(exc) from exc
    return document.to_dict()


@router.patch("/{document_id}", summary="Update document")
async def update_document(
    document_id: str,
    body: UpdateDocumentRequest,
    service: DocumentService = Depends(get_document_service),
) -> dict[str, Any]:
    """Merge the supplied fields into a document.

    Top-level fields are replaced; ``metadata`` keys are merged into the
    existing metadata.
    """
    try:
        document = await service.update(document_id, body.to_changes())
    except LocalMemoryError as exc:
        raise domain_http_exception(exc) from exc
    return document.to_dict()


@router.delete(
    "/{document_id}",
    response_model=DeleteDocumentResponse,
    summary="Delete document",
)
async def delete_document(
    document_id: str,
    service: DocumentService = Depends(get_document_service),
) -> DeleteDocumentResponse:
    """Delete a document record. An uploaded file stays on disk."""
    try:
        await service.delete(document_id)
    except LocalMemoryError as exc:
        raise domain_http_exception(exc) from exc
    return DeleteDocumentResponse(success=True)
