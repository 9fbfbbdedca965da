"""Palindrome test that relies only on an ordering of the elements."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any


def is_palindrome(items: Sequence[Any], key: Callable[[Any], Any] | None = None) -> bool:
    """Report whether ``items`` reads the same backwards.

    Two elements count as equal when neither is less than the other,
    comparing ``key(element)`` when a key is given.
    """
    keys = list(items) if key is None else [key(item) for item in items]
    half = len(keys) // 2
    return all(
        not (a < b or b < a) for a, b in zip(keys[:half], reversed(keys[len(keys) - half:]))
    )