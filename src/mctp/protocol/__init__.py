"""MCTP wire codec. Request and response framing shared by both sides."""

from mctp.protocol.headers import Headers
from mctp.protocol.request import Request, decode_request, encode_request
from mctp.protocol.response import (
    Response,
    decode_response,
    document_response,
    encode_response,
    not_found_response,
)

__all__ = [
    "Headers",
    "Request",
    "Response",
    "decode_request",
    "decode_response",
    "document_response",
    "encode_request",
    "encode_response",
    "not_found_response",
]
