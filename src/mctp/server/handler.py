"""Request handling: raw request bytes in, framed ``Response`` out.

Independent of sockets so it can be exercised directly in tests.
"""

import logging

import anyio

from mctp.documents.store import DocumentStore
from mctp.errors import DocumentNotFound
from mctp.protocol.request import decode_request
from mctp.protocol.response import Response, document_response, not_found_response
from mctp.routing.table import RouteResolver, resolve_document_id

logger = logging.getLogger("mctp.server")


async def respond(raw_request: bytes, resolver: RouteResolver, store: DocumentStore) -> Response:
    """Resolve one request to a success or not-found response.

    The store is read in a worker thread so a slow lookup only suspends
    the connection that asked for it. Lookup failures never reach the
    wire; the client sees the fixed 404.
    """
    path = decode_request(raw_request)
    document_id = resolve_document_id(path, resolver)

    try:
        content = await anyio.to_thread.run_sync(store.read, document_id)
    except DocumentNotFound as exc:
        logger.info("404 %s (%s)", path, exc)
        return not_found_response()

    logger.info("200 %s -> %s (%d bytes)", path, document_id, len(content))
    return document_response(content)
