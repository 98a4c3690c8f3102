"""API Schemas Package."""

from localmemory.api.schemas.document_schemas import (
    CreateDocumentRequest,
    DeleteDocumentResponse,
    DocumentsByIdsRequest,
    ListDocumentsRequest,
    UpdateDocumentRequest,
)
from localmemory.api.schemas.errors import ErrorResponse

__all__ = [
    "CreateDocumentRequest",
    "DeleteDocumentResponse",
    "DocumentsByIdsRequest",
    "ListDocumentsRequest",
    "UpdateDocumentRequest",
    "ErrorResponse",
]
