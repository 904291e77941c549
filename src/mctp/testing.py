"""Test utilities for MCTP servers.

Runs a real ``Responder`` on a loopback ephemeral port, so tests exercise
the same sockets and framing as production::

    async with serving(ServerConfig(content_root=tmp_path)) as client_config:
        response = await Requestor(client_config).get("/hello")
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import replace

import anyio

from mctp.config import ClientConfig, ServerConfig
from mctp.documents.store import DocumentStore
from mctp.routing.table import RouteResolver
from mctp.server.responder import Responder


@asynccontextmanager
async def serving(
    config: ServerConfig | None = None,
    *,
    resolver: RouteResolver | None = None,
    store: DocumentStore | None = None,
    timeout: float = 5.0,
) -> AsyncIterator[ClientConfig]:
    """Serve *config* in the background and yield a client config pointing at it.

    The configured port is ignored; the server binds an ephemeral port on
    the configured host. The server is cancelled when the block exits.
    """
    config = replace(config or ServerConfig(), port=0)
    responder = Responder(config, resolver=resolver, store=store)
    async with anyio.create_task_group() as tg:
        host, port = await tg.start(responder.serve)
        try:
            yield ClientConfig(host=host, port=port, timeout=timeout)
        finally:
            tg.cancel_scope.cancel()
