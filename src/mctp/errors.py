"""MCTP exception hierarchy.

Shared by the codec, the Responder, and the Requestor so every module
raises and catches the same types.
"""


class MCTPError(Exception):
    """Base for all mctp-specific errors."""


class ConfigurationError(MCTPError):
    """Raised when a server or client configuration is invalid.

    Raised by ``ServerConfig`` / ``ClientConfig`` at construction.
    """


class InvalidRequest(MCTPError, ValueError):
    """A request path that cannot be framed on the wire."""


class TransportError(MCTPError):
    """Connect or socket failure.

    The underlying ``OSError`` (or anyio stream error) is chained as
    ``__cause__``. Never retried.
    """


class ConnectTimeout(TransportError, TimeoutError):  # noqa: N818
    """The connect phase did not finish within the client timeout."""


class DocumentNotFound(MCTPError, LookupError):  # noqa: N818
    """A document identifier could not be read from the store.

    The Responder maps this to the fixed ``404 Not Found`` response;
    it never reaches the wire as an error message.
    """

    def __init__(self, document_id: str) -> None:
        super().__init__(document_id)
        self.document_id = document_id

    def __str__(self) -> str:
        return f"Document not found: {self.document_id!r}"


class ParseError(MCTPError):
    """Response bytes could not be split into status, headers, and body."""
