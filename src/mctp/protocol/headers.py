"""Immutable, ordered, case-insensitive MCTP headers.

Implements ``Mapping[str, str]``. Stores ``(name, value)`` string pairs in
wire order; lookups ignore case, iteration keeps the original casing.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping


class Headers(Mapping[str, str]):
    """Immutable, ordered, case-insensitive headers.

    A name given more than once keeps its first position and takes the
    last value, so ``Headers`` always holds one entry per name::

        h = Headers([("Content-Type", "text/plain"), ("content-type", "text/markdown")])
        list(h)             # ["Content-Type"]
        h["CONTENT-TYPE"]   # "text/markdown"
    """

    __slots__ = ("_pairs",)

    def __init__(self, pairs: Iterable[tuple[str, str]] | Mapping[str, str] = ()) -> None:
        if isinstance(pairs, Mapping):
            pairs = pairs.items()
        merged: dict[str, tuple[str, str]] = {}
        for name, value in pairs:
            key = name.lower()
            first = merged[key][0] if key in merged else name
            merged[key] = (first, value)
        object.__setattr__(self, "_pairs", tuple(merged.values()))

    def __getitem__(self, key: str) -> str:
        key_lower = key.lower()
        for name, value in self._pairs:
            if name.lower() == key_lower:
                return value
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        key_lower = key.lower()
        return any(name.lower() == key_lower for name, _ in self._pairs)

    def __iter__(self) -> Iterator[str]:
        for name, _ in self._pairs:
            yield name

    def __len__(self) -> int:
        return len(self._pairs)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self._pairs)
        return f"Headers({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the value for *key*, or *default* if missing."""
        try:
            return self[key]
        except KeyError:
            return default

    def without(self, *names: str) -> Headers:
        """Return a copy with the given header names removed."""
        drop = {name.lower() for name in names}
        return Headers([pair for pair in self._pairs if pair[0].lower() not in drop])

    @property
    def pairs(self) -> tuple[tuple[str, str], ...]:
        """The ``(name, value)`` pairs in wire order."""
        return self._pairs
