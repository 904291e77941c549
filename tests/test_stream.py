"""Tests for mctp.protocol.stream — request and response accumulation."""

import anyio
import pytest

from mctp.protocol.stream import drain, receive_all, receive_request

pytestmark = pytest.mark.anyio


class ChunkStream:
    """Delivers fixed chunks, then end of stream."""

    def __init__(self, *chunks: bytes) -> None:
        self.chunks = list(chunks)
        self.reads = 0

    async def receive(self, max_bytes: int = 65536) -> bytes:
        if not self.chunks:
            raise anyio.EndOfStream
        self.reads += 1
        return self.chunks.pop(0)


class TestReceiveRequest:
    async def test_stops_at_terminator(self) -> None:
        stream = ChunkStream(b"Request: GET /a", b"\n\n", b"never read")
        assert await receive_request(stream) == b"Request: GET /a\n\n"  # type: ignore[arg-type]
        assert stream.chunks == [b"never read"]

    async def test_stops_at_end_of_stream(self) -> None:
        stream = ChunkStream(b"Request: GET /a\n")
        assert await receive_request(stream) == b"Request: GET /a\n"  # type: ignore[arg-type]

    async def test_stops_at_limit(self) -> None:
        stream = ChunkStream(b"x" * 10, b"x" * 10, b"x" * 10)
        data = await receive_request(stream, limit=15)  # type: ignore[arg-type]
        assert data == b"x" * 20
        assert stream.reads == 2

    async def test_empty_stream(self) -> None:
        assert await receive_request(ChunkStream()) == b""  # type: ignore[arg-type]


class TestReceiveAll:
    async def test_reads_past_blank_lines(self) -> None:
        stream = ChunkStream(b"Status: 200 OK\n\n", b"a\n\n", b"b")
        assert await receive_all(stream) == b"Status: 200 OK\n\na\n\nb"  # type: ignore[arg-type]

    async def test_empty_stream(self) -> None:
        assert await receive_all(ChunkStream()) == b""  # type: ignore[arg-type]


class HangingStream:
    """Never delivers anything."""

    async def receive(self, max_bytes: int = 65536) -> bytes:
        await anyio.sleep_forever()
        raise AssertionError


class TestDrain:
    async def test_discards_until_end_of_stream(self) -> None:
        stream = ChunkStream(b"junk", b"more junk")
        assert await drain(stream) == 13  # type: ignore[arg-type]
        assert stream.chunks == []

    async def test_stops_at_limit(self) -> None:
        stream = ChunkStream(b"x" * 10, b"x" * 10, b"x" * 10)
        assert await drain(stream, limit=15) == 20  # type: ignore[arg-type]
        assert stream.chunks == [b"x" * 10]

    async def test_stops_at_timeout(self) -> None:
        with anyio.fail_after(5):
            assert await drain(HangingStream(), timeout=0.01) == 0  # type: ignore[arg-type]
