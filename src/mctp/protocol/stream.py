"""Byte-stream accumulation for both sides of a connection.

The transport carries no length prefix ahead of the headers, so each side
buffers explicitly: the Responder until the request terminator, the
Requestor until the peer closes the stream. After answering, the Responder
drains whatever the client sent past its request, so closing the socket
with unread data does not reset the connection under the response.
"""

import anyio
from anyio.abc import ByteReceiveStream

REQUEST_TERMINATOR = b"\n\n"
MAX_REQUEST_SIZE = 64 * 1024
DRAIN_TIMEOUT = 1.0


async def receive_request(
    stream: ByteReceiveStream, *, limit: int = MAX_REQUEST_SIZE
) -> bytes:
    """Read until the blank-line terminator, end of stream, or *limit* bytes."""
    buffer = bytearray()
    while REQUEST_TERMINATOR not in buffer and len(buffer) < limit:
        try:
            buffer += await stream.receive()
        except anyio.EndOfStream:
            break
    return bytes(buffer)


async def receive_all(stream: ByteReceiveStream) -> bytes:
    """Read until the peer signals end of stream."""
    buffer = bytearray()
    while True:
        try:
            buffer += await stream.receive()
        except anyio.EndOfStream:
            return bytes(buffer)


async def drain(
    stream: ByteReceiveStream,
    *,
    limit: int = MAX_REQUEST_SIZE,
    timeout: float = DRAIN_TIMEOUT,
) -> int:
    """Discard incoming bytes until the peer closes, *limit* bytes, or *timeout*.

    Returns the number of bytes discarded.
    """
    drained = 0
    with anyio.move_on_after(timeout):
        while drained < limit:
            try:
                drained += len(await stream.receive())
            except (anyio.EndOfStream, anyio.BrokenResourceError):
                break
    return drained
