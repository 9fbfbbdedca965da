"""Writers that count the bytes, words or lines written to them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def _as_bytes(data: str | bytes | bytearray) -> bytes:
    return data.encode() if isinstance(data, str) else bytes(data)


def _as_text(data: str | bytes | bytearray) -> str:
    return data if isinstance(data, str) else bytes(data).decode("utf-8", errors="replace")


@dataclass
class ByteCounter:
    """A writer that counts the bytes written to it."""

    count: int = 0

    def write(self, data: str | bytes | bytearray) -> int:
        """Add the length of ``data`` in bytes and return it."""
        size = len(_as_bytes(data))
        self.count += size
        return size

    def __int__(self) -> int:
        return self.count


@dataclass
class WordCounter:
    """A writer that counts the whitespace-separated words written to it."""

    count: int = 0

    def write(self, data: str | bytes | bytearray) -> int:
        """Add the number of words in ``data`` and return it."""
        words = len(_as_text(data).split())
        self.count += words
        return words

    def __int__(self) -> int:
        return self.count


@dataclass
class LineCounter:
    """A writer that counts the lines written to it.

    A final newline does not start a new line; an unterminated last line counts.
    """

    count: int = 0

    def write(self, data: str | bytes | bytearray) -> int:
        """Add the number of lines in ``data`` and return it."""
        pieces = _as_text(data).split("\n")
        if pieces[-1] == "":
            pieces.pop()
        self.count += len(pieces)
        return len(pieces)

    def __int__(self) -> int:
        return self.count


class CountingWriter:
    """Wrap a writer, counting the bytes passed through to it in ``count``."""

    def __init__(self, target: Any) -> None:
        self._target = target
        self.count = 0

    def write(self, data: str | bytes | bytearray) -> Any:
        """Count ``data`` and write it to the wrapped writer."""
        self.count += len(_as_bytes(data))
        return self._target.write(data)