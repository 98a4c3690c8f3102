"""Tests for FileDocumentStore."""

import asyncio
import json

import pytest

from localmemory.core.domain.document import Document
from localmemory.core.domain.errors import NotFoundError
from localmemory.infrastructure.persistence.file_document_store import (
    FileDocumentStore,
)


class TestFileDocumentStore:
    """Tests for one-file-per-document persistence."""

    async def test_put_writes_one_json_file_named_by_id(
        self, document_store: FileDocumentStore
    ) -> None:
        doc = Document.from_content("hello world")
        await document_store.put(doc)

        files = list(document_store.data_dir.iterdir())
        assert [f.name for f in files] == [f"{doc.id}.json"]
        stored = json.loads(files[0].read_text(encoding="utf-8"))
        assert stored == doc.to_dict()

    async def test_get_round_trip(self, document_store: FileDocumentStore) -> None:
        doc = Document.from_content("http://example.com", ["a"], {"k": "v"})
        await document_store.put(doc)
        assert await document_store.get(doc.id) == doc

    async def test_repeated_reads_are_identical(
        self, document_store: FileDocumentStore
    ) -> None:
        doc = await document_store.put(Document.from_content("note"))
        first = await document_store.get(doc.id)
        second = await document_store.get(doc.id)
        assert first == second

    async def test_get_missing_raises_not_found(
        self, document_store: FileDocumentStore
    ) -> None:
        with pytest.raises(NotFoundError):
            await document_store.get("nonexistent")

    async def test_get_corrupt_raises_not_found(
        self, document_store: FileDocumentStore
    ) -> None:
        (document_store.data_dir / "broken.json").write_text("{not json")
        with pytest.raises(NotFoundError):
            await document_store.get("broken")

    @pytest.mark.parametrize("bad_id", ["../escape", "a/b", ""])
    async def test_path_like_ids_are_not_found(
        self, document_store: FileDocumentStore, bad_id: str
    ) -> None:
        with pytest.raises(NotFoundError):
            await document_store.get(bad_id)

    async def test_put_overwrites_and_leaves_no_temp_file(
        self, document_store: FileDocumentStore
    ) -> None:
        doc = await document_store.put(Document.from_content("original"))
        doc.title = "changed"
        await document_store.put(doc)

        loaded = await document_store.get(doc.id)
        assert loaded.title == "changed"
        assert not list(document_store.data_dir.glob("*.tmp"))

    async def test_delete_then_delete_again(
        self, document_store: FileDocumentStore
    ) -> None:
        doc = await document_store.put(Document.from_content("to delete"))
        await document_store.delete(doc.id)

        with pytest.raises(NotFoundError):
            await document_store.get(doc.id)
        with pytest.raises(NotFoundError):
            await document_store.delete(doc.id)

    async def test_list_all_is_newest_first(
        self, document_store: FileDocumentStore
    ) -> None:
        t1 = Document.from_content("one", now="2024-01-01T00:00:01+00:00")
        t2 = Document.from_content("two", now="2024-01-01T00:00:02+00:00")
        t3 = Document.from_content("three", now="2024-01-01T00:00:03+00:00")
        for doc in (t2, t1, t3):
            await document_store.put(doc)

        listed = await document_store.list_all()
        assert [d.content for d in listed] == ["three", "two", "one"]

    async def test_list_all_ties_are_deterministic(
        self, document_store: FileDocumentStore
    ) -> None:
        stamp = "2024-01-01T00:00:00+00:00"
        for i in range(5):
            await document_store.put(
                Document.from_content(f"n{i}", document_id=f"id-{i}", now=stamp)
            )

        first = [d.id for d in await document_store.list_all()]
        second = [d.id for d in await document_store.list_all()]
        assert first == second == sorted(first)

    async def test_list_all_skips_corrupt_records(
        self, document_store: FileDocumentStore
    ) -> None:
        good = [await document_store.put(Document.from_content(f"ok {i}")) for i in range(3)]
        (document_store.data_dir / "corrupt.json").write_text("{\"id\": ")
        (document_store.data_dir / "notarecord.json").write_text("[1, 2, 3]")
        (document_store.data_dir / "badtags.json").write_text(
            json.dumps({"id": "badtags", "containerTags": [{"a": 1}]})
        )

        listed = await document_store.list_all()
        assert {d.id for d in listed} == {d.id for d in good}

    async def test_list_all_ignores_temp_files(
        self, document_store: FileDocumentStore
    ) -> None:
        doc = await document_store.put(Document.from_content("kept"))
        (document_store.data_dir / "partial.json.tmp").write_text("{}")
        assert [d.id for d in await document_store.list_all()] == [doc.id]

    async def test_lock_serializes_holders(
        self, document_store: FileDocumentStore
    ) -> None:
        events: list[str] = []

        async def hold(name: str) -> None:
            async with document_store.lock("same-id"):
                events.append(f"{name}-start")
                await asyncio.sleep(0.01)
                events.append(f"{name}-end")

        await asyncio.gather(hold("a"), hold("b"))
        assert events in (
            ["a-start", "a-end", "b-start", "b-end"],
            ["b-start", "b-end", "a-start", "a-end"],
        )

    async def test_lock_entries_are_released(
        self, document_store: FileDocumentStore
    ) -> None:
        async def hold(document_id: str) -> None:
            async with document_store.lock(document_id):
                await asyncio.sleep(0.01)

        await asyncio.gather(hold("a"), hold("a"), hold("b"))
        assert document_store._locks == {}
        assert document_store._lock_holders == {}

    async def test_lock_entry_released_when_block_raises(
        self, document_store: FileDocumentStore
    ) -> None:
        with pytest.raises(NotFoundError):
            async with document_store.lock("missing"):
                await document_store.get("missing")
        assert document_store._locks == {}
