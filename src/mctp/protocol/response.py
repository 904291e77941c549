"""MCTP response framing.

A response is a fixed version line, a ``Status:`` line, ``Name: value``
header lines, one blank line, and the raw body::

    MCTP/1.0
    Status: 200 OK
    Content-Type: text/markdown
    Content-Length: 2

    Hi

``Content-Length`` is always computed from the body bytes, never taken
from the caller. The client relies on the server closing the connection
to know the body is complete.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from mctp.errors import ParseError
from mctp.protocol.headers import Headers

VERSION = "MCTP/1.0"
SEPARATOR = b"\n\n"

STATUS_OK = "200 OK"
STATUS_NOT_FOUND = "404 Not Found"
STATUS_UNKNOWN = "Unknown"

MARKDOWN = "text/markdown"
PLAIN_TEXT = "text/plain"
NOT_FOUND_BODY = b"Not Found"


@dataclass(frozen=True, slots=True)
class Response:
    """A framed MCTP response, as sent by the Responder or parsed by the Requestor.

    ``headers`` holds the headers as they appear on the wire, including
    ``Content-Type`` and ``Content-Length``.
    """

    status: str
    headers: Headers = field(default_factory=Headers)
    body: bytes = b""

    @property
    def status_code(self) -> int | None:
        """Numeric part of the status line, or None if it has none."""
        code, _, _ = self.status.partition(" ")
        return int(code) if code.isdigit() else None

    @property
    def content_type(self) -> str | None:
        return self.headers.get("Content-Type")

    @property
    def content_length(self) -> int | None:
        value = self.headers.get("Content-Length")
        return int(value) if value is not None and value.isdigit() else None

    @property
    def text(self) -> str:
        """Body decoded as UTF-8."""
        return self.body.decode("utf-8", errors="replace")

    def encode(self) -> bytes:
        """Frame this response for the wire."""
        return encode_response(self.status, self.headers, self.body)


def _check_line(what: str, text: str) -> None:
    if "\n" in text or "\r" in text:
        msg = f"{what} must not contain line breaks: {text!r}."
        raise ValueError(msg)


def encode_response(
    status: str,
    headers: Mapping[str, str] | Iterable[tuple[str, str]],
    body: bytes,
) -> bytes:
    """Frame a response.

    ``Content-Type`` is written first, then the remaining headers in the
    order given, then ``Content-Length`` computed from ``len(body)``.
    A ``Content-Length`` supplied by the caller is ignored.

    Raises:
        ValueError: If *headers* has no ``Content-Type``, or if the status
            or a header would break framing: a line break anywhere, a colon
            in a header name, or a header named ``Status``.
    """
    headers = headers if isinstance(headers, Headers) else Headers(headers)
    _check_line("Status", status)
    for name, value in headers.pairs:
        _check_line("Header name", name)
        _check_line("Header value", value)
        if ":" in name or not name.strip():
            msg = f"Invalid header name {name!r}."
            raise ValueError(msg)
        if name.strip().lower() == "status":
            msg = "Status must be passed as the status, not as a header."
            raise ValueError(msg)
    content_type = headers.get("Content-Type")
    if content_type is None:
        msg = "Response headers must include Content-Type."
        raise ValueError(msg)

    lines = [VERSION, f"Status: {status}", f"Content-Type: {content_type}"]
    lines.extend(
        f"{name}: {value}"
        for name, value in headers.without("Content-Type", "Content-Length").pairs
    )
    lines.append(f"Content-Length: {len(body)}")
    head = "\n".join(lines) + "\n\n"
    return head.encode() + body


def decode_response(data: bytes) -> Response:
    """Parse a complete response, as accumulated until end-of-stream.

    The header section ends at the first blank line; everything after it,
    blank lines included, is the body. A missing separator means an empty
    body. A missing ``Status:`` line yields status ``"Unknown"``.

    Raises:
        ParseError: If the header section cannot be decoded.
    """
    try:
        head, _, body = data.partition(SEPARATOR)
        lines = [line for line in head.decode("utf-8").split("\n") if line]
    except (UnicodeDecodeError, TypeError) as exc:
        msg = f"Failed to parse MCTP response: {exc}"
        raise ParseError(msg) from exc

    status = STATUS_UNKNOWN
    pairs: list[tuple[str, str]] = []
    for line in lines:
        if line.startswith("Status: "):
            status = line[len("Status: ") :].strip()
        elif ":" in line:
            name, _, value = line.partition(":")
            pairs.append((name.strip(), value.strip()))

    return Response(status=status, headers=Headers(pairs), body=body)


def document_response(content: bytes) -> Response:
    """200 response carrying a markdown document."""
    return Response(
        status=STATUS_OK,
        headers=Headers([("Content-Type", MARKDOWN), ("Content-Length", str(len(content)))]),
        body=content,
    )


def not_found_response() -> Response:
    """The fixed 404 response. The body is always the 9 bytes ``Not Found``."""
    return Response(
        status=STATUS_NOT_FOUND,
        headers=Headers(
            [("Content-Type", PLAIN_TEXT), ("Content-Length", str(len(NOT_FOUND_BODY)))]
        ),
        body=NOT_FOUND_BODY,
    )
