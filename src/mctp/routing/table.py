"""Route table and document-identifier normalization."""

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Protocol, runtime_checkable

DEFAULT_SUFFIX = ".md"
DOCUMENT_SUFFIXES = (DEFAULT_SUFFIX,)


@runtime_checkable
class RouteResolver(Protocol):
    """Anything that can map a logical path to a document identifier.

    Returns None when the path has no explicit route.
    """

    def lookup(self, path: str) -> str | None: ...


class RouteTable(Mapping[str, str]):
    """Immutable mapping from logical path to document identifier.

    Usage::

        routes = RouteTable({"/": "index.md", "/hello": "hello.md"})
        routes.lookup("/hello")    # "hello.md"
        routes.lookup("/missing")  # None
    """

    __slots__ = ("_routes",)

    def __init__(self, routes: Mapping[str, str] | None = None) -> None:
        self._routes = MappingProxyType(dict(routes or {}))

    def __getitem__(self, path: str) -> str:
        return self._routes[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        return f"RouteTable({dict(self._routes)!r})"

    def lookup(self, path: str) -> str | None:
        """Return the document identifier routed at *path*, or None."""
        return self._routes.get(path)


def resolve_document_id(path: str, resolver: RouteResolver) -> str:
    """Turn a requested path into a normalized document identifier.

    An explicit route wins; otherwise the path itself is used, so clients
    can address documents that have no route. Identifiers without a
    recognized suffix get ``.md`` appended. No other validation happens
    here; containment is checked by the document store.

    Examples::

        "/hello"         -> "hello.md"      (routed)
        "/guide/intro"   -> "/guide/intro.md"
        "/notes.md"      -> "/notes.md"
    """
    document_id = resolver.lookup(path) or path
    if not document_id.endswith(DOCUMENT_SUFFIXES):
        document_id += DEFAULT_SUFFIX
    return document_id
