"""Tests for mctp.protocol.headers — ordered, case-insensitive Headers."""

import pytest

from mctp.protocol.headers import Headers


class TestHeaders:
    def test_getitem(self) -> None:
        h = Headers([("Content-Type", "text/markdown")])
        assert h["Content-Type"] == "text/markdown"

    def test_case_insensitive(self) -> None:
        h = Headers([("Content-Type", "text/markdown")])
        assert h["content-type"] == "text/markdown"
        assert h["CONTENT-TYPE"] == "text/markdown"

    def test_missing_key_raises(self) -> None:
        h = Headers([("Content-Type", "text/plain")])
        with pytest.raises(KeyError):
            h["X-Missing"]

    def test_contains(self) -> None:
        h = Headers([("Content-Length", "2")])
        assert "content-length" in h
        assert "Content-Length" in h
        assert "x-missing" not in h

    def test_contains_rejects_non_str(self) -> None:
        h = Headers([("Content-Length", "2")])
        assert 42 not in h  # type: ignore[operator]

    def test_preserves_insertion_order_and_case(self) -> None:
        h = Headers([("Content-Type", "text/plain"), ("X-Trace", "1"), ("Content-Length", "9")])
        assert list(h) == ["Content-Type", "X-Trace", "Content-Length"]

    def test_repeated_name_keeps_position_takes_last_value(self) -> None:
        h = Headers([("X-A", "1"), ("X-B", "2"), ("x-a", "3")])
        assert list(h) == ["X-A", "X-B"]
        assert h["X-A"] == "3"
        assert len(h) == 2

    def test_from_mapping(self) -> None:
        h = Headers({"Content-Type": "text/markdown", "Content-Length": "2"})
        assert h.pairs == (("Content-Type", "text/markdown"), ("Content-Length", "2"))

    def test_equals_plain_dict(self) -> None:
        h = Headers([("Content-Type", "text/markdown"), ("Content-Length", "2")])
        assert h == {"Content-Type": "text/markdown", "Content-Length": "2"}

    def test_get_with_default(self) -> None:
        h = Headers([("Content-Length", "2")])
        assert h.get("content-length") == "2"
        assert h.get("x-missing") is None
        assert h.get("x-missing", "fallback") == "fallback"

    def test_without(self) -> None:
        h = Headers([("Content-Type", "text/plain"), ("X-A", "1"), ("Content-Length", "9")])
        assert list(h.without("content-type", "CONTENT-LENGTH")) == ["X-A"]
        assert len(h) == 3

    def test_empty(self) -> None:
        assert len(Headers()) == 0
        assert list(Headers()) == []

    def test_repr(self) -> None:
        assert repr(Headers([("A", "1")])) == "Headers({'A': '1'})"
