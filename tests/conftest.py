"""Shared fixtures for mctp tests."""

from pathlib import Path

import pytest


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """A content root with a few markdown documents."""
    content = tmp_path / "content"
    content.mkdir()
    (content / "index.md").write_text("# Home\n")
    (content / "hello.md").write_text("Hi")
    (content / "unicode.md").write_text("héllo wörld ✓", encoding="utf-8")
    (content / "spaced.md").write_text("first\n\nsecond\n\nthird")

    guide = content / "guide"
    guide.mkdir()
    (guide / "intro.md").write_text("Intro")

    (tmp_path / "secret.md").write_text("outside")
    return content


@pytest.fixture
def routes() -> dict[str, str]:
    return {"/": "index.md", "/hello": "hello.md"}
