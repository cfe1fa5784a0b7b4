"""
Unit tests for the content registry and content store.
"""

import asyncio
from pathlib import Path

import pytest

from src.services.content_registry import ContentRegistry
from src.services.content_store import ContentStore
from src.utils.errors import (
    DocumentMissing,
    IOFailure,
    LoadFailureCause,
    ParseFailure,
)


def build_store(content_dir) -> ContentStore:
    registry = ContentRegistry(content_dir)
    registry.refresh()
    return ContentStore(registry)


def test_registry_enumerates_posts(content_dir):
    registry = ContentRegistry(content_dir)
    assert len(registry) == 0
    assert registry.refresh() == 4
    assert registry.slugs() == ["broken", "hello-world", "no-front-matter", "second-post"]
    assert "hello-world" in registry
    assert registry.get("hello-world") == content_dir / "hello-world.md"


def test_registry_skips_unsafe_and_foreign_files(content_dir):
    (content_dir / "bad name.md").write_text("# nope", encoding="utf-8")
    (content_dir / "notes.txt").write_text("not a post", encoding="utf-8")
    (content_dir / "drafts").mkdir()
    (content_dir / "drafts" / "draft.md").write_text("# draft", encoding="utf-8")
    registry = ContentRegistry(content_dir)
    registry.refresh()
    assert "bad name" not in registry
    assert "notes" not in registry
    assert "draft" not in registry
    assert len(registry) == 4


def test_registry_never_contains_paths_outside_content_dir(content_dir):
    registry = ContentRegistry(content_dir)
    registry.refresh()
    assert registry.get("../secret") is None
    assert registry.get("secret") is None


def test_registry_missing_directory_is_empty(tmp_path):
    registry = ContentRegistry(tmp_path / "does-not-exist")
    assert registry.refresh() == 0
    assert registry.slugs() == []


def test_registry_refresh_picks_up_new_posts(content_dir):
    registry = ContentRegistry(content_dir)
    registry.refresh()
    (content_dir / "fresh.md").write_text("# Fresh", encoding="utf-8")
    assert "fresh" not in registry
    registry.refresh()
    assert "fresh" in registry


def test_store_loads_front_matter_and_body(content_dir):
    store = build_store(content_dir)
    parsed = asyncio.run(store.load("hello-world"))
    assert parsed.metadata == {"title": "Hello", "date": "2021-01-01"}
    assert parsed.body == "<h1>Hi</h1>"


def test_store_loads_post_without_front_matter(content_dir):
    store = build_store(content_dir)
    parsed = asyncio.run(store.load("no-front-matter"))
    assert parsed.metadata == {}
    assert parsed.body == "<p>Just a body.</p>"


def test_store_unregistered_slug_is_missing(content_dir):
    store = build_store(content_dir)
    with pytest.raises(DocumentMissing) as excinfo:
        asyncio.run(store.load("missing-post"))
    assert excinfo.value.cause is LoadFailureCause.DOCUMENT_MISSING


def test_store_file_removed_after_registration_is_missing(content_dir):
    store = build_store(content_dir)
    (content_dir / "hello-world.md").unlink()
    with pytest.raises(DocumentMissing):
        asyncio.run(store.load("hello-world"))


def test_store_invalid_front_matter_is_parse_failure(content_dir):
    store = build_store(content_dir)
    with pytest.raises(ParseFailure) as excinfo:
        asyncio.run(store.load("broken"))
    assert excinfo.value.cause is LoadFailureCause.PARSE_FAILURE


def test_store_invalid_utf8_is_parse_failure(content_dir):
    (content_dir / "binary.md").write_bytes(b"\xff\xfe\xfa not text")
    store = build_store(content_dir)
    with pytest.raises(ParseFailure):
        asyncio.run(store.load("binary"))


def test_store_read_error_is_io_failure(content_dir, monkeypatch):
    store = build_store(content_dir)

    def deny(self, *args, **kwargs):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "read_text", deny)
    with pytest.raises(IOFailure) as excinfo:
        asyncio.run(store.load("hello-world"))
    assert excinfo.value.cause is LoadFailureCause.IO_FAILURE
    assert "Permission denied" in excinfo.value.detail


def test_store_rereads_files_on_every_load(content_dir):
    store = build_store(content_dir)
    first = asyncio.run(store.load("hello-world"))
    (content_dir / "hello-world.md").write_text(
        '---\ntitle: "Hello again"\ndate: "2021-01-02"\n---\n# Hi\n', encoding="utf-8"
    )
    second = asyncio.run(store.load("hello-world"))
    assert first.metadata["title"] == "Hello"
    assert second.metadata["title"] == "Hello again"


def test_store_reads_front_matter_after_byte_order_mark(content_dir):
    (content_dir / "bom.md").write_bytes(
        b'\xef\xbb\xbf---\ntitle: "Hello"\ndate: "2021-01-01"\n---\n# Hi\n'
    )
    store = build_store(content_dir)
    parsed = asyncio.run(store.load("bom"))
    assert parsed.metadata == {"title": "Hello", "date": "2021-01-01"}
    assert parsed.body == "<h1>Hi</h1>"
