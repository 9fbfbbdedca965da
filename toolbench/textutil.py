"""Small text and number helpers: word frequencies, $-expansion, min, max, join."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable
from itertools import takewhile
from typing import TextIO


def word_freq(stream: TextIO | Iterable[str]) -> dict[str, int]:
    """Count the whitespace-separated words read from ``stream``, case-folded to lower."""
    return dict(Counter(word.lower() for line in stream for word in line.split()))


def expand(text: str, substitute: Callable[[str], str]) -> str:
    """Replace each ``$name`` in ``text`` by ``substitute(name)``.

    A name is the run of letters right after the ``$``; it may be empty.
    """
    head, *rest = text.split("$")
    pieces = [head]
    for part in rest:
        name = "".join(takewhile(str.isalpha, part))
        pieces.append(substitute(name))
        pieces.append(part[len(name):])
    return "".join(pieces)


def minimum(first: int, *args: int) -> int:
    """Return the smallest of the arguments; at least one is required."""
    return min((first, *args))


def maximum(first: int, *args: int) -> int:
    """Return the largest of the arguments; at least one is required."""
    return max((first, *args))


def join_strings(sep: str, *args: str) -> str:
    """Join ``args`` with ``sep`` between each pair."""
    return sep.join(args)