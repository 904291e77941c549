"""Filesystem document store.

Resolves document identifiers against a content root. The root is always
the base: a leading ``/`` in an identifier is relative to the root, not
to the filesystem.

Security: resolves ``..`` segments and symlinks, then verifies the final
path is inside the content root. Anything outside is reported as missing,
which the Responder turns into the ordinary 404.
"""

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from mctp.errors import DocumentNotFound

logger = logging.getLogger("mctp.server")


@runtime_checkable
class DocumentStore(Protocol):
    """Read-only document lookup.

    ``read`` returns the raw document bytes or raises ``DocumentNotFound``.
    """

    def read(self, document_id: str) -> bytes: ...


class FileSystemStore:
    """Documents stored as files under a content root.

    Usage::

        store = FileSystemStore("./content")
        store.read("hello.md")  # b"Hi"
    """

    __slots__ = ("_root",)

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root).resolve()

    @property
    def root(self) -> Path:
        return self._root

    def locate(self, document_id: str) -> Path:
        """Return the concrete file path for *document_id*.

        Raises:
            DocumentNotFound: If the path escapes the content root or is
                not a usable filesystem path (e.g. contains a NUL byte).
        """
        relative = document_id.lstrip("/")
        try:
            file_path = (self._root / relative).resolve()
        except (OSError, ValueError) as exc:
            logger.debug("Cannot locate %r: %s", document_id, exc)
            raise DocumentNotFound(document_id) from exc
        if not file_path.is_relative_to(self._root):
            logger.warning("Refusing document outside content root: %r", document_id)
            raise DocumentNotFound(document_id)
        return file_path

    def read(self, document_id: str) -> bytes:
        """Read a document's bytes.

        Raises:
            DocumentNotFound: If the document is missing, unreadable, or
                outside the content root. The OS error is chained.
        """
        file_path = self.locate(document_id)
        try:
            return file_path.read_bytes()
        except (OSError, ValueError) as exc:
            logger.debug("Cannot read %s: %s", file_path, exc)
            raise DocumentNotFound(document_id) from exc
