"""Stable sorting by an arbitrary less-than function, and a sample table row."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, TypeVar

T = TypeVar("T")


@dataclass
class TableRow:
    """A row with a sort column and its original position."""

    col: int
    pos: int

    def __str__(self) -> str:
        return f"{{col:{self.col},pos:{self.pos}}}"


def stable_sort(
    items: Iterable[T], less: Callable[[Any, Any], bool] | None = None
) -> list[T]:
    """Return ``items`` sorted by ``less``, keeping equal items in their original order.

    Two items are equal when neither is less than the other. ``less``
    defaults to the < operator.
    """
    less = operator.lt if less is None else less

    def compare(a: tuple[int, T], b: tuple[int, T]) -> int:
        (i, x), (j, y) = a, b
        if less(x, y):
            return -1
        if less(y, x):
            return 1
        return (i > j) - (i < j)

    return [item for _, item in sorted(enumerate(items), key=cmp_to_key(compare))]


def format_table(rows: Sequence[TableRow]) -> str:
    """Return every row followed by a space, as "{col:1,pos:0} {col:2,pos:1} "."""
    return "".join(f"{row} " for row in rows)