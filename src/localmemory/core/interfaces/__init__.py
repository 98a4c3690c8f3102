"""
Core Protocol Interfaces

Protocols for the storage dependencies of the document service.

Available Protocols:
    - DocumentStoreProtocol: Keyed document persistence
    - BlobStoreProtocol: Write-once uploaded file storage
"""

from localmemory.core.interfaces.document_store import (
    BlobStoreProtocol,
    DocumentStoreProtocol,
)

__all__ = ["BlobStoreProtocol", "DocumentStoreProtocol"]
