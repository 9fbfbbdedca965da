"""Minimal readers: one over a string and one that stops after a byte limit."""

from __future__ import annotations

from typing import Any


class StringReader:
    """A readable file-like object over a string."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def read(self, size: int | None = -1) -> str:
        """Return up to ``size`` characters, all remaining if negative; "" at the end."""
        if size is None or size < 0:
            end = len(self._text)
        else:
            end = min(len(self._text), self._pos + size)
        chunk = self._text[self._pos:end]
        self._pos = end
        return chunk


class LimitedReader:
    """Read from ``reader`` but report end of input after ``limit`` units."""

    def __init__(self, reader: Any, limit: int) -> None:
        if limit < 0:
            raise ValueError(f"limit must not be negative, got {limit}")
        self._reader = reader
        self.limit = limit
        self._consumed = 0

    def read(self, size: int | None = -1) -> Any:
        """Read up to ``size`` units, never more than the limit allows in total."""
        remaining = self.limit - self._consumed
        if remaining <= 0:
            return self._reader.read(0)
        want = remaining if size is None or size < 0 else min(size, remaining)
        data = self._reader.read(want)
        self._consumed += len(data)
        return data


def limit_reader(reader: Any, limit: int) -> LimitedReader:
    """Return a reader that reads from ``reader`` and stops after ``limit`` units."""
    return LimitedReader(reader, limit)