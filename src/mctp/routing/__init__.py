"""Routing — logical path to document identifier.

The route table is built once from configuration and never mutated while
serving.
"""

from mctp.routing.table import (
    DEFAULT_SUFFIX,
    DOCUMENT_SUFFIXES,
    RouteResolver,
    RouteTable,
    resolve_document_id,
)

__all__ = [
    "DEFAULT_SUFFIX",
    "DOCUMENT_SUFFIXES",
    "RouteResolver",
    "RouteTable",
    "resolve_document_id",
]
