"""
File-Based Document Store

One JSON file per document, named by document id:

    {data_dir}/
    ├── {document_id}.json
    └── {document_id}.json

The directory listing is the index; there is no separate catalogue file.

The implementation provides:
- Async file I/O using aiofiles
- Atomic writes (write to temp file, then rename)
- Per-document asyncio locks for read-merge-write cycles
- Corruption tolerance during enumeration (bad records are logged and skipped)
"""

from __future__ import annotations

import asyncio
import json
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

import aiofiles
import structlog

from localmemory.core.domain.document import Document
from localmemory.core.domain.errors import document_not_found
from localmemory.core.domain.query import sort_newest_first

logger = structlog.get_logger(__name__)


class FileDocumentStore:
    """
    File-based document persistence implementing DocumentStoreProtocol.

    Thread Safety:
        Uses asyncio locks per document id. Plain ``put`` calls are not
        serialized; callers that read, merge and write hold ``lock(id)``.

    Example:
        >>> store = FileDocumentStore(data_dir=".gitmemory/data")
        >>> doc = await store.put(Document.from_content("hello world"))
        >>> loaded = await store.get(doc.id)
        >>> assert loaded.title == "hello world"
    """

    def __init__(self, data_dir: str | Path) -> None:
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self._locks: dict[str, asyncio.Lock] = {}
        self._lock_holders: dict[str, int] = {}
        self._locks_lock = asyncio.Lock()

    def _path_for(self, document_id: str) -> Path:
        """Return the record path, rejecting ids that are not plain names."""
        if not document_id or Path(document_id).name != document_id:
            raise document_not_found(document_id)
        return self.data_dir / f"{document_id}.json"

    async def _acquire_lock_entry(self, document_id: str) -> asyncio.Lock:
        """Get or create the lock for a document id and count one holder."""
        async with self._locks_lock:
            if document_id not in self._locks:
                self._locks[document_id] = asyncio.Lock()
            self._lock_holders[document_id] = self._lock_holders.get(document_id, 0) + 1
            return self._locks[document_id]

    def _release_lock_entry(self, document_id: str) -> None:
        """Drop one holder; the last one out removes the lock entry."""
        remaining = self._lock_holders[document_id] - 1
        if remaining:
            self._lock_holders[document_id] = remaining
            return
        del self._lock_holders[document_id]
        del self._locks[document_id]

    @asynccontextmanager
    async def lock(self, document_id: str) -> AsyncIterator[None]:
        """Hold the per-document lock for the duration of the block.

        Lock entries live only while someone holds or waits on them.
        """
        doc_lock = await self._acquire_lock_entry(document_id)
        try:
            async with doc_lock:
                yield
        finally:
            self._release_lock_entry(document_id)

    async def _read(self, path: Path) -> Document:
        async with aiofiles.open(path, encoding="utf-8") as f:
            raw = await f.read()
        return Document.from_dict(json.loads(raw))

    async def get(self, document_id: str) -> Document:
        """
        Load a document.

        Raises:
            NotFoundError: If no record exists or it cannot be parsed.
        """
        path = self._path_for(document_id)
        if not path.exists():
            raise document_not_found(document_id)
        try:
            return await self._read(path)
        except (OSError, ValueError) as exc:
            logger.warning(
                "document_store.load_failed",
                document_id=document_id,
                error=str(exc),
            )
            raise document_not_found(document_id) from exc

    async def put(self, document: Document) -> Document:
        """Write the whole record atomically and return it."""
        path = self._path_for(document.id)
        tmp = path.with_suffix(".json.tmp")
        data = json.dumps(document.to_dict(), indent=2, ensure_ascii=False)
        async with aiofiles.open(tmp, "w", encoding="utf-8") as f:
            await f.write(data)
        tmp.replace(path)
        logger.debug("document_store.saved", document_id=document.id)
        return document

    async def delete(self, document_id: str) -> None:
        """
        Remove a document record. Not idempotent.

        Raises:
            NotFoundError: If no record exists.
        """
        path = self._path_for(document_id)
        try:
            path.unlink()
        except FileNotFoundError as exc:
            raise document_not_found(document_id) from exc
        logger.debug("document_store.deleted", document_id=document_id)

    async def list_all(self) -> list[Document]:
        """
        Load every readable record, newest first.

        File names are enumerated in sorted order so that documents sharing a
        ``createdAt`` value come back in the same order on every call.
        """
        documents: list[Document] = []
        for path in sorted(self.data_dir.glob("*.json")):
            try:
                documents.append(await self._read(path))
            except (OSError, ValueError) as exc:
                logger.warning(
                    "document_store.load_failed", path=str(path), error=str(exc)
                )
        return sort_newest_first(documents)
