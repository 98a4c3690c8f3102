"""
Domain Models and Business Logic

This package contains the core domain models of the local memory server:
- Document records and their derivation rules
- Query helpers (tag filtering, ordering, pagination)
- Domain error types
"""

from localmemory.core.domain.document import Document, DocumentStatus, DocumentType
from localmemory.core.domain.errors import (
    ConfigError,
    LocalMemoryError,
    NotFoundError,
    ValidationError,
)
from localmemory.core.domain.query import DocumentPage, Pagination

__all__ = [
    "Document",
    "DocumentStatus",
    "DocumentType",
    "DocumentPage",
    "Pagination",
    "LocalMemoryError",
    "NotFoundError",
    "ValidationError",
    "ConfigError",
]
