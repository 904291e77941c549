"""MCTP request framing.

A request is a single line naming the verb and the logical path,
terminated by a blank line::

    Request: GET /hello\\n
    \\n

Requests never carry a body.
"""

from dataclasses import dataclass

from mctp.errors import InvalidRequest

METHOD = "GET"
REQUEST_PREFIX = f"Request: {METHOD} "
ROOT_PATH = "/"


@dataclass(frozen=True, slots=True)
class Request:
    """A single MCTP request. Exists only long enough to be encoded."""

    path: str = ROOT_PATH
    method: str = METHOD

    def __post_init__(self) -> None:
        if self.method != METHOD:
            msg = f"Unsupported method {self.method!r}; only {METHOD} is supported."
            raise InvalidRequest(msg)
        if not self.path.startswith("/"):
            msg = f"Request path must start with '/', got {self.path!r}."
            raise InvalidRequest(msg)
        if "\n" in self.path or "\r" in self.path:
            msg = f"Request path must not contain line breaks: {self.path!r}."
            raise InvalidRequest(msg)

    def encode(self) -> bytes:
        """Frame the request for the wire."""
        return f"Request: {self.method} {self.path}\n\n".encode()


def encode_request(path: str) -> bytes:
    """Frame a GET request for *path*.

    Raises:
        InvalidRequest: If *path* is not slash-prefixed or spans lines.
    """
    return Request(path).encode()


def decode_request(data: bytes) -> str:
    """Extract the requested path from raw request bytes.

    Parsing is lenient: a request with no recognizable request line
    resolves to ``"/"`` instead of raising. A request line with an empty
    path yields ``""``, which names no document. When more than one
    request line is present the last one wins.
    """
    path = ROOT_PATH
    for line in data.decode("utf-8", errors="replace").split("\n"):
        if line.startswith(REQUEST_PREFIX):
            path = line[len(REQUEST_PREFIX) :].strip()
    return path
