"""Document stores: read-only lookup of document bytes by identifier."""

from mctp.documents.store import DocumentStore, FileSystemStore

__all__ = ["DocumentStore", "FileSystemStore"]
