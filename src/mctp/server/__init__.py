"""Responder — the listening side of MCTP.

One anyio task per accepted connection; each connection carries exactly
one request and one response, then the server closes it.
"""

from mctp.server.handler import respond
from mctp.server.responder import Responder

__all__ = ["Responder", "respond"]
