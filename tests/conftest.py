"""Test configuration and shared fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from localmemory.application.document_service import DocumentService
from localmemory.application.settings import ServerSettings
from localmemory.infrastructure.persistence.file_blob_store import FileBlobStore
from localmemory.infrastructure.persistence.file_document_store import (
    FileDocumentStore,
)


@pytest.fixture
def settings(tmp_path: Path) -> ServerSettings:
    """Settings rooted in a per-test memory directory."""
    return ServerSettings(memory_dir=tmp_path / ".gitmemory")


@pytest.fixture
def document_store(settings: ServerSettings) -> FileDocumentStore:
    return FileDocumentStore(data_dir=settings.data_dir)


@pytest.fixture
def blob_store(settings: ServerSettings) -> FileBlobStore:
    return FileBlobStore(files_dir=settings.files_dir)


@pytest.fixture
def document_service(
    document_store: FileDocumentStore, blob_store: FileBlobStore
) -> DocumentService:
    return DocumentService(store=document_store, blobs=blob_store)
