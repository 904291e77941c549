"""Tests for mctp.documents.store — filesystem lookup under a content root."""

import os
from pathlib import Path

import pytest

from mctp.documents import DocumentStore, FileSystemStore
from mctp.errors import DocumentNotFound


class TestFileSystemStore:
    def test_reads_document(self, content_dir: Path) -> None:
        assert FileSystemStore(content_dir).read("hello.md") == b"Hi"

    def test_leading_slash_is_relative_to_root(self, content_dir: Path) -> None:
        assert FileSystemStore(content_dir).read("/hello.md") == b"Hi"

    def test_nested_document(self, content_dir: Path) -> None:
        assert FileSystemStore(content_dir).read("/guide/intro.md") == b"Intro"

    def test_returns_raw_bytes(self, content_dir: Path) -> None:
        assert FileSystemStore(content_dir).read("unicode.md") == "héllo wörld ✓".encode()

    def test_missing_document(self, content_dir: Path) -> None:
        with pytest.raises(DocumentNotFound) as exc_info:
            FileSystemStore(content_dir).read("missing.md")
        assert exc_info.value.document_id == "missing.md"
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_directory_is_not_a_document(self, content_dir: Path) -> None:
        (content_dir / "folder.md").mkdir()
        with pytest.raises(DocumentNotFound):
            FileSystemStore(content_dir).read("folder.md")

    def test_parent_traversal_refused(self, content_dir: Path) -> None:
        with pytest.raises(DocumentNotFound):
            FileSystemStore(content_dir).read("/../secret.md")

    def test_traversal_that_stays_inside_is_allowed(self, content_dir: Path) -> None:
        assert FileSystemStore(content_dir).read("/guide/../hello.md") == b"Hi"

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="needs symlinks")
    def test_symlink_escape_refused(self, content_dir: Path) -> None:
        (content_dir / "link.md").symlink_to(content_dir.parent / "secret.md")
        with pytest.raises(DocumentNotFound):
            FileSystemStore(content_dir).read("link.md")

    def test_root_is_resolved(self, content_dir: Path) -> None:
        store = FileSystemStore(content_dir / "guide" / "..")
        assert store.root == content_dir.resolve()

    def test_locate(self, content_dir: Path) -> None:
        store = FileSystemStore(content_dir)
        assert store.locate("/hello.md") == (content_dir / "hello.md").resolve()

    def test_satisfies_store_protocol(self, content_dir: Path) -> None:
        assert isinstance(FileSystemStore(content_dir), DocumentStore)

    def test_not_found_message(self) -> None:
        assert str(DocumentNotFound("x.md")) == "Document not found: 'x.md'"

    def test_nul_byte_is_not_found(self, content_dir: Path) -> None:
        with pytest.raises(DocumentNotFound) as exc_info:
            FileSystemStore(content_dir).read("/a\x00b.md")
        assert isinstance(exc_info.value.__cause__, ValueError)
