"""Document domain model.

A document (also called a "memory" by the client) is an opaque record with
identity, content, container tags, metadata and timestamps. Records are
stored exactly as ``to_dict`` renders them, using the camelCase field names
the client expects on the wire.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any
from uuid import uuid4

from localmemory.core.utils.time import utc_now_iso

# Notes are titled with the leading slice of their content.
NOTE_TITLE_LENGTH = 50

LINK_PREFIX = "http"

# Fields an update may never change.
IMMUTABLE_FIELDS = frozenset({"id", "type", "createdAt"})

# Reserved for server-side processing, which never runs here.
RESERVED_FIELDS = frozenset({"memoryEntries"})

_KNOWN_FIELDS = frozenset(
    {
        "id",
        "content",
        "url",
        "title",
        "type",
        "status",
        "createdAt",
        "updatedAt",
        "containerTags",
        "metadata",
        "memoryEntries",
    }
)


class DocumentType(str, Enum):
    """Kind of document, fixed at creation."""

    NOTE = "note"
    LINK = "link"
    FILE = "file"


class DocumentStatus(str, Enum):
    """Processing state. There is no pipeline, so documents are always done."""

    DONE = "done"


def classify_content(content: str) -> DocumentType:
    """Return ``LINK`` for content starting with ``http``, else ``NOTE``."""
    if content.startswith(LINK_PREFIX):
        return DocumentType.LINK
    return DocumentType.NOTE


def new_document_id() -> str:
    """Generate a fresh document identifier."""
    return str(uuid4())


@dataclass
class Document:
    """A persisted document.

    Attributes:
        id: Unique identifier, also the storage filename stem.
        content: Free-text body (empty for uploaded files).
        url: The content itself for links, otherwise ``None``.
        title: Derived display title.
        type: note, link or file.
        status: Lifecycle marker, always ``done``.
        created_at: ISO timestamp of creation, never changes.
        updated_at: ISO timestamp of the last mutation.
        container_tags: Caller-supplied grouping labels.
        metadata: Open mapping, merged key by key on update.
        memory_entries: Reserved sub-structure, always empty.
        extra: Any additional top-level fields supplied through updates.
    """

    id: str
    content: str = ""
    url: str | None = None
    title: str = ""
    type: DocumentType = DocumentType.NOTE
    status: str = DocumentStatus.DONE.value
    created_at: str = field(default_factory=utc_now_iso)
    updated_at: str = field(default_factory=utc_now_iso)
    container_tags: list[str] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    memory_entries: list[Any] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_content(
        cls,
        content: str,
        container_tags: list[str] | None = None,
        metadata: dict[str, Any] | None = None,
        *,
        document_id: str | None = None,
        now: str | None = None,
    ) -> Document:
        """Build a note or link document from free text."""
        doc_type = classify_content(content)
        is_link = doc_type is DocumentType.LINK
        timestamp = now or utc_now_iso()
        return cls(
            id=document_id or new_document_id(),
            content=content,
            url=content if is_link else None,
            title=content if is_link else content[:NOTE_TITLE_LENGTH],
            type=doc_type,
            created_at=timestamp,
            updated_at=timestamp,
            container_tags=list(container_tags or []),
            metadata=dict(metadata or {}),
        )

    @classmethod
    def from_upload(
        cls,
        document_id: str,
        *,
        file_name: str,
        file_size: int,
        mime_type: str,
        local_path: str,
        container_tags: list[str] | None = None,
        metadata: dict[str, Any] | None = None,
        now: str | None = None,
    ) -> Document:
        """Build a file document referencing a stored blob.

        File facts overwrite caller metadata keys of the same name.
        """
        timestamp = now or utc_now_iso()
        return cls(
            id=document_id,
            content="",
            url=None,
            title=file_name,
            type=DocumentType.FILE,
            created_at=timestamp,
            updated_at=timestamp,
            container_tags=list(container_tags or []),
            metadata={
                **(metadata or {}),
                "fileName": file_name,
                "fileSize": file_size,
                "mimeType": mime_type,
                "localPath": local_path,
            },
        )

    @property
    def created_at_sort_key(self) -> datetime:
        """Parsed creation time used for newest-first ordering."""
        try:
            parsed = datetime.fromisoformat(self.created_at)
        except (TypeError, ValueError):
            return datetime.min.replace(tzinfo=UTC)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=UTC)
        return parsed

    def has_any_tag(self, tags: list[str]) -> bool:
        """Return True when this document shares at least one tag with ``tags``."""
        wanted = set(tags)
        return any(tag in wanted for tag in self.container_tags)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for storage and for API responses."""
        data: dict[str, Any] = dict(self.extra)
        data.update(
            {
                "id": self.id,
                "content": self.content,
                "url": self.url,
                "title": self.title,
                "type": self.type.value,
                "status": self.status,
                "createdAt": self.created_at,
                "updatedAt": self.updated_at,
                "containerTags": list(self.container_tags),
                "metadata": dict(self.metadata),
                "memoryEntries": list(self.memory_entries),
            }
        )
        return data

    @classmethod
    def from_dict(cls, data: Any) -> Document:
        """Deserialize from a stored dict.

        Raises:
            ValueError: If ``data`` is not a record (not a mapping, no id,
                unknown type, or wrongly typed collections).
        """
        if not isinstance(data, dict):
            raise ValueError("document record must be a JSON object")
        document_id = data.get("id")
        if not isinstance(document_id, str) or not document_id:
            raise ValueError("document record has no id")

        tags = data.get("containerTags") or []
        metadata = data.get("metadata") or {}
        entries = data.get("memoryEntries") or []
        if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
            raise ValueError("containerTags must be a list of strings")
        if not isinstance(metadata, dict):
            raise ValueError("metadata must be an object")
        if not isinstance(entries, list):
            raise ValueError("memoryEntries must be a list")

        return cls(
            id=document_id,
            content=str(data.get("content") or ""),
            url=data.get("url"),
            title=str(data.get("title") or ""),
            type=DocumentType(data.get("type", DocumentType.NOTE.value)),
            status=str(data.get("status") or DocumentStatus.DONE.value),
            created_at=str(data.get("createdAt", "")),
            updated_at=str(data.get("updatedAt", "")),
            container_tags=list(tags),
            metadata=dict(metadata),
            memory_entries=list(entries),
            extra={k: v for k, v in data.items() if k not in _KNOWN_FIELDS},
        )

    def merged_with(self, changes: dict[str, Any], *, now: str | None = None) -> Document:
        """Return a copy with ``changes`` applied.

        Top-level fields in ``changes`` replace the current values, while
        ``changes["metadata"]`` is merged key by key over the existing
        metadata so keys not mentioned in the update are kept. ``id``,
        ``type`` and ``createdAt`` are never changed, ``memoryEntries`` stays
        empty and ``updatedAt`` is always refreshed.
        """
        current = self.to_dict()
        merged = {**current, **changes}
        merged["metadata"] = {**current["metadata"], **(changes.get("metadata") or {})}
        for name in IMMUTABLE_FIELDS:
            merged[name] = current[name]
        for name in RESERVED_FIELDS:
            merged[name] = []
        merged["updatedAt"] = now or utc_now_iso()
        return Document.from_dict(merged)
