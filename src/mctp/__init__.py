"""MCTP — a minimal line-oriented protocol for fetching markdown documents.

One request, one response, one connection. The server resolves a logical
path through a route table to a document under a content root; the client
reads until the server closes and parses status, headers, and body.

Serving::

    from mctp import Responder, ServerConfig

    Responder(ServerConfig(port=9196, content_root="content",
                           routes={"/": "index.md", "/hello": "hello.md"})).run()

Fetching::

    from mctp import ClientConfig, Requestor

    response = await Requestor(ClientConfig(port=9196)).get("/hello")
    print(response.status, response.text)
"""

__version__ = "0.1.0"
__all__ = [
    "ClientConfig",
    "ConfigurationError",
    "ConnectTimeout",
    "DocumentNotFound",
    "FileSystemStore",
    "Headers",
    "InvalidRequest",
    "MCTPError",
    "ParseError",
    "Requestor",
    "Responder",
    "Response",
    "RouteTable",
    "ServerConfig",
    "TransportError",
    "fetch",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import mctp`` from pulling in anyio until a server or client
    is actually used.
    """
    if name in ("ClientConfig", "ServerConfig"):
        from mctp import config as _config

        return getattr(_config, name)

    if name in ("Requestor", "fetch"):
        from mctp.client import requestor as _client

        return getattr(_client, name)

    if name == "Responder":
        from mctp.server.responder import Responder

        return Responder

    if name in ("Headers", "Response"):
        from mctp import protocol as _protocol

        return getattr(_protocol, name)

    if name == "RouteTable":
        from mctp.routing.table import RouteTable

        return RouteTable

    if name == "FileSystemStore":
        from mctp.documents.store import FileSystemStore

        return FileSystemStore

    if name in (
        "ConfigurationError",
        "ConnectTimeout",
        "DocumentNotFound",
        "InvalidRequest",
        "MCTPError",
        "ParseError",
        "TransportError",
    ):
        from mctp import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
