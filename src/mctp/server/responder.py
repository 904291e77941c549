"""TCP listener for MCTP.

Usage::

    responder = Responder(ServerConfig(port=9196, content_root="content",
                                       routes={"/": "index.md", "/hello": "hello.md"}))
    responder.run()

Or inside an existing event loop, with the bound address reported back::

    async with anyio.create_task_group() as tg:
        host, port = await tg.start(responder.serve)
"""

import logging

import anyio
from anyio.abc import SocketAttribute, SocketStream, TaskStatus

from mctp.config import ServerConfig
from mctp.documents.store import DocumentStore, FileSystemStore
from mctp.protocol.stream import drain, receive_request
from mctp.routing.table import RouteResolver, RouteTable
from mctp.server.handler import respond

logger = logging.getLogger("mctp.server")


def _peer_name(stream: SocketStream) -> str:
    try:
        host, port = stream.extra(SocketAttribute.remote_address)[:2]
    except (anyio.TypedAttributeLookupError, ValueError):
        return "unknown"
    return f"{host}:{port}"


class Responder:
    """Serves documents over MCTP, one exchange per connection.

    The route resolver and document store default to a ``RouteTable`` and
    ``FileSystemStore`` built from *config*; pass your own to serve from
    somewhere else. Both are only ever read.
    """

    __slots__ = ("config", "resolver", "store")

    def __init__(
        self,
        config: ServerConfig | None = None,
        *,
        resolver: RouteResolver | None = None,
        store: DocumentStore | None = None,
    ) -> None:
        self.config = config or ServerConfig()
        self.resolver = resolver if resolver is not None else RouteTable(self.config.routes)
        self.store = store if store is not None else FileSystemStore(self.config.content_root)

    async def serve(
        self, *, task_status: TaskStatus[tuple[str, int]] = anyio.TASK_STATUS_IGNORED
    ) -> None:
        """Listen and serve until cancelled.

        Reports the actually bound ``(host, port)`` through *task_status*,
        which matters when the configured port is ``0``.
        """
        listener = await anyio.create_tcp_listener(
            local_host=self.config.host, local_port=self.config.port
        )
        async with listener:
            host, port = listener.extra(SocketAttribute.local_address)[:2]
            logger.info("MCTP server listening on %s:%s", host, port)
            task_status.started((host, port))
            await listener.serve(self.handle_connection)

    def run(self) -> None:
        """Blocking entry point: serve until interrupted."""
        try:
            anyio.run(self.serve)
        except KeyboardInterrupt:
            logger.info("MCTP server stopped")

    async def handle_connection(self, stream: SocketStream) -> None:
        """Handle one connection: read, resolve, respond, close.

        After the response the write side is shut down and unread client
        bytes are drained, so the close cannot reset the connection before
        the client has read the response.

        Failures are contained to this connection and logged; the
        listener keeps accepting.
        """
        peer = _peer_name(stream)
        logger.debug("Client connected: %s", peer)
        async with stream:
            try:
                raw_request = await receive_request(stream)
                response = await respond(raw_request, self.resolver, self.store)
                await stream.send(response.encode())
                await stream.send_eof()
                await drain(stream)
            except (anyio.BrokenResourceError, anyio.ClosedResourceError, OSError) as exc:
                logger.warning("Connection error from %s: %s", peer, exc)
            except Exception:
                logger.exception("Unhandled error serving %s", peer)
        logger.debug("Client disconnected: %s", peer)
