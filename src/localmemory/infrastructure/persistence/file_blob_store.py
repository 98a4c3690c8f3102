"""File-based blob store for uploaded documents."""

from __future__ import annotations

from pathlib import Path

import aiofiles
import structlog

logger = structlog.get_logger(__name__)


class FileBlobStore:
    """Write-once storage for uploaded file payloads.

    Storage layout::

        {files_dir}/
        ├── {document_id}-{file_name}
        └── {document_id}-{file_name}

    Blobs are never read or deleted here; serving them is left to whatever
    exposes ``files_dir``.
    """

    def __init__(self, files_dir: str | Path) -> None:
        self.files_dir = Path(files_dir)
        self.files_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, document_id: str, file_name: str) -> Path:
        """Return the blob path; only the last component of ``file_name`` is used."""
        safe_name = Path(file_name).name or "upload"
        return self.files_dir / f"{document_id}-{safe_name}"

    async def store(self, document_id: str, file_name: str, data: bytes) -> str:
        """Write the full payload and return its storage path."""
        path = self.path_for(document_id, file_name)
        async with aiofiles.open(path, "wb") as f:
            await f.write(data)
        logger.debug(
            "blob_store.saved",
            document_id=document_id,
            path=str(path),
            size=len(data),
        )
        return str(path)
