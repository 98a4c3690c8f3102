"""Filtering, ordering and pagination over the full document set.

These are pure functions: the caller supplies every document and gets back
a page. Nothing is cached between calls.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Iterable

from localmemory.core.domain.document import Document
from localmemory.core.domain.errors import ValidationError


@dataclass(frozen=True)
class Pagination:
    """Page window description returned alongside listed documents."""

    current_page: int
    limit: int
    total_items: int
    total_pages: int

    def to_dict(self) -> dict[str, int]:
        """Serialize with the client's field names."""
        return {
            "currentPage": self.current_page,
            "limit": self.limit,
            "totalItems": self.total_items,
            "totalPages": self.total_pages,
        }


@dataclass
class DocumentPage:
    """One page of documents plus its pagination block."""

    items: list[Document] = field(default_factory=list)
    pagination: Pagination = field(default_factory=lambda: Pagination(1, 10, 0, 0))

    def to_dict(self) -> dict[str, Any]:
        """Listed documents always carry an empty ``memoryEntries``."""
        return {
            "documents": [
                {**doc.to_dict(), "memoryEntries": []} for doc in self.items
            ],
            "pagination": self.pagination.to_dict(),
        }


def sort_newest_first(documents: Iterable[Document]) -> list[Document]:
    """Order by ``createdAt`` descending.

    The sort is stable, so documents with equal timestamps keep the order
    they were supplied in.
    """
    return sorted(documents, key=lambda doc: doc.created_at_sort_key, reverse=True)


def filter_by_tags(
    documents: Iterable[Document], container_tags: list[str] | None
) -> list[Document]:
    """Keep documents sharing at least one tag; no tags means no filtering."""
    if not container_tags:
        return list(documents)
    return [doc for doc in documents if doc.has_any_tag(container_tags)]


def filter_by_ids(documents: Iterable[Document], ids: Iterable[str]) -> list[Document]:
    """Keep documents whose id is in ``ids``, preserving input order."""
    wanted = set(ids)
    return [doc for doc in documents if doc.id in wanted]


def paginate(documents: list[Document], page: int, limit: int) -> DocumentPage:
    """Slice ``documents`` to the requested page window.

    A page past the end yields an empty page, not an error.

    Raises:
        ValidationError: If ``page`` < 1 or ``limit`` < 1.
    """
    if page < 1 or limit < 1:
        raise ValidationError(
            "page and limit must be positive integers",
            details={"page": page, "limit": limit},
        )
    total_items = len(documents)
    offset = (page - 1) * limit
    return DocumentPage(
        items=documents[offset : offset + limit],
        pagination=Pagination(
            current_page=page,
            limit=limit,
            total_items=total_items,
            total_pages=math.ceil(total_items / limit),
        ),
    )


def query_documents(
    documents: list[Document],
    page: int,
    limit: int,
    container_tags: list[str] | None = None,
) -> DocumentPage:
    """Filter by tags, then paginate. ``documents`` must already be ordered."""
    return paginate(filter_by_tags(documents, container_tags), page, limit)
