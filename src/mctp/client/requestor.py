"""One request, one response, one connection.

Usage::

    requestor = Requestor(ClientConfig(port=9196))
    response = await requestor.get("/hello")
    response.status  # "200 OK"
    response.text    # "Hi"

Or from synchronous code::

    response = fetch("/hello", ClientConfig(port=9196))
"""

import logging

import anyio

from mctp.config import ClientConfig
from mctp.errors import ConnectTimeout, TransportError
from mctp.protocol.request import ROOT_PATH, encode_request
from mctp.protocol.response import Response, decode_response
from mctp.protocol.stream import receive_all

logger = logging.getLogger("mctp.client")


class Requestor:
    """Issues MCTP requests against one server.

    Each ``get`` opens a fresh connection. The configured timeout bounds
    the connect phase; once connected, the call waits for the server to
    close the stream. Nothing is retried.
    """

    __slots__ = ("config",)

    def __init__(self, config: ClientConfig | None = None) -> None:
        self.config = config or ClientConfig()

    async def get(self, path: str = ROOT_PATH) -> Response:
        """Fetch the document at *path*.

        A missing document is not an error here: it comes back as a
        normal response with status ``"404 Not Found"``.

        Raises:
            InvalidRequest: If *path* cannot be framed.
            ConnectTimeout: If the connection is not made within the timeout.
            TransportError: If connecting, sending, or receiving fails.
            ParseError: If the response cannot be decoded.
        """
        request = encode_request(path)
        host, port = self.config.host, self.config.port

        try:
            with anyio.fail_after(self.config.timeout):
                stream = await anyio.connect_tcp(host, port)
        except TimeoutError as exc:
            msg = f"Connection to {host}:{port} timed out after {self.config.timeout}s"
            raise ConnectTimeout(msg) from exc
        except OSError as exc:
            msg = f"Cannot connect to {host}:{port}: {exc}"
            raise TransportError(msg) from exc

        async with stream:
            try:
                await stream.send(request)
                data = await receive_all(stream)
            except (anyio.BrokenResourceError, anyio.ClosedResourceError, OSError) as exc:
                msg = f"Connection to {host}:{port} failed: {exc}"
                raise TransportError(msg) from exc

        response = decode_response(data)
        logger.debug("GET %s -> %s (%d bytes)", path, response.status, len(response.body))
        return response


def fetch(path: str = ROOT_PATH, config: ClientConfig | None = None) -> Response:
    """Blocking wrapper around ``Requestor.get`` for code without an event loop."""
    return anyio.run(Requestor(config).get, path)
