"""Tests for filtering, ordering and pagination."""

import pytest

from localmemory.core.domain.document import Document
from localmemory.core.domain.errors import ValidationError
from localmemory.core.domain.query import (
    filter_by_ids,
    filter_by_tags,
    paginate,
    query_documents,
    sort_newest_first,
)


def _doc(index: int, tags: list[str] | None = None) -> Document:
    return Document.from_content(
        f"note {index}",
        container_tags=tags,
        now=f"2024-01-01T00:00:{index:02d}+00:00",
    )


class TestPaginate:
    @pytest.fixture
    def documents(self) -> list[Document]:
        return [_doc(i) for i in range(25)]

    @pytest.mark.parametrize(("page", "expected"), [(1, 10), (2, 10), (3, 5), (4, 0)])
    def test_page_sizes(self, documents, page, expected) -> None:
        result = paginate(documents, page=page, limit=10)
        assert len(result.items) == expected
        assert result.pagination.total_pages == 3
        assert result.pagination.total_items == 25
        assert result.pagination.current_page == page
        assert result.pagination.limit == 10

    def test_page_window_offsets(self, documents) -> None:
        result = paginate(documents, page=2, limit=10)
        assert result.items == documents[10:20]

    def test_empty_input(self) -> None:
        result = paginate([], page=1, limit=10)
        assert result.items == []
        assert result.pagination.total_items == 0
        assert result.pagination.total_pages == 0

    @pytest.mark.parametrize(("page", "limit"), [(0, 10), (-1, 10), (1, 0), (1, -5)])
    def test_rejects_non_positive_inputs(self, documents, page, limit) -> None:
        with pytest.raises(ValidationError):
            paginate(documents, page=page, limit=limit)

    def test_to_dict_shape(self, documents) -> None:
        data = paginate(documents, page=1, limit=1).to_dict()
        assert data["pagination"] == {
            "currentPage": 1,
            "limit": 1,
            "totalItems": 25,
            "totalPages": 25,
        }
        assert len(data["documents"]) == 1

    def test_listed_documents_have_no_memory_entries(self) -> None:
        doc = _doc(1)
        doc.memory_entries = [{"x": 1}]
        data = paginate([doc], page=1, limit=10).to_dict()
        assert data["documents"][0]["memoryEntries"] == []


class TestFilterByTags:
    def test_shared_tag_includes_document(self) -> None:
        doc = _doc(1, ["x", "y"])
        assert filter_by_tags([doc], ["y", "z"]) == [doc]

    def test_disjoint_tags_exclude_document(self) -> None:
        doc = _doc(1, ["x", "y"])
        assert filter_by_tags([doc], ["z"]) == []

    @pytest.mark.parametrize("tags", [None, []])
    def test_empty_filter_keeps_everything(self, tags) -> None:
        docs = [_doc(1, ["x"]), _doc(2)]
        assert filter_by_tags(docs, tags) == docs

    def test_untagged_documents_never_match_a_filter(self) -> None:
        assert filter_by_tags([_doc(1)], ["x"]) == []


class TestOrdering:
    def test_newest_first(self) -> None:
        t1, t2, t3 = _doc(1), _doc(2), _doc(3)
        assert sort_newest_first([t1, t3, t2]) == [t3, t2, t1]

    def test_ties_keep_input_order(self) -> None:
        a = Document.from_content("a", now="2024-01-01T00:00:00+00:00")
        b = Document.from_content("b", now="2024-01-01T00:00:00+00:00")
        assert sort_newest_first([a, b]) == [a, b]
        assert sort_newest_first([b, a]) == [b, a]

    def test_unparseable_timestamps_sort_last(self) -> None:
        good = _doc(1)
        bad = Document.from_content("bad", now="not-a-date")
        assert sort_newest_first([bad, good]) == [good, bad]


class TestQueryDocuments:
    def test_filter_then_paginate(self) -> None:
        docs = [_doc(i, ["even"] if i % 2 == 0 else ["odd"]) for i in range(10)]
        result = query_documents(docs, page=1, limit=3, container_tags=["even"])
        assert result.pagination.total_items == 5
        assert result.pagination.total_pages == 2
        assert [d.content for d in result.items] == ["note 0", "note 2", "note 4"]

    def test_filter_by_ids_preserves_document_order(self) -> None:
        docs = [_doc(3), _doc(2), _doc(1)]
        found = filter_by_ids(docs, [docs[2].id, docs[0].id, "missing"])
        assert found == [docs[0], docs[2]]
