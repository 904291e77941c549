"""Server and client configuration.

Frozen dataclasses, passed explicitly at construction. No process-wide
defaults, no string-key dict lookups::

    config = ServerConfig(port=9196, content_root="content", routes={"/": "index.md"})
    client = ClientConfig(port=9196, timeout=1.0)
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from mctp.errors import ConfigurationError

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 9090
DEFAULT_TIMEOUT = 5.0


def _check_port(port: int) -> None:
    if not 0 <= port <= 65535:
        msg = f"Port must be between 0 and 65535, got {port}."
        raise ConfigurationError(msg)


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Responder configuration. Immutable after creation.

    ``routes`` maps logical paths (``"/hello"``) to document identifiers
    (``"hello.md"``). It is copied into a read-only mapping, so later
    changes to the dict passed in are not seen by a running server.
    Port ``0`` binds an ephemeral port.
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    content_root: str | Path = "."
    routes: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _check_port(self.port)
        for path in self.routes:
            if not path.startswith("/"):
                msg = f"Route {path!r} must start with '/'."
                raise ConfigurationError(msg)
        object.__setattr__(self, "routes", MappingProxyType(dict(self.routes)))


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Requestor configuration. Immutable after creation.

    ``timeout`` is in seconds and bounds the connect phase only.
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        _check_port(self.port)
        if self.timeout <= 0:
            msg = f"Timeout must be positive, got {self.timeout}."
            raise ConfigurationError(msg)
