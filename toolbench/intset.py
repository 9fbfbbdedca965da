"""A set of small non-negative integers stored as a bit vector."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import chain, repeat

_WORD_BITS = 64


class IntSet:
    """A set of small non-negative integers.

    Elements are kept as bits in a list of 64-bit words, so the memory used
    grows with the largest element ever added, not with the number of elements.
    """

    __slots__ = ("_words",)

    def __init__(self, *args: int) -> None:
        self._words: list[int] = []
        self.add_all(*args)

    def __len__(self) -> int:
        return sum(word.bit_count() for word in self._words)

    def __contains__(self, x: object) -> bool:
        if not isinstance(x, int) or x < 0:
            return False
        word, bit = divmod(x, _WORD_BITS)
        return word < len(self._words) and bool(self._words[word] >> bit & 1)

    def __iter__(self) -> Iterator[int]:
        for index, word in enumerate(self._words):
            base = index * _WORD_BITS
            while word:
                lowest = word & -word
                yield base + lowest.bit_length() - 1
                word ^= lowest

    def __str__(self) -> str:
        return "{" + " ".join(map(str, self)) + "}"

    def __repr__(self) -> str:
        return f"IntSet({', '.join(map(str, self))})"

    def word_count(self) -> int:
        """Return the number of words currently allocated for the set."""
        return len(self._words)

    def add(self, x: int) -> None:
        """Add the non-negative value ``x`` to the set."""
        if x < 0:
            raise ValueError(f"IntSet holds non-negative integers only, got {x}")
        word, bit = divmod(x, _WORD_BITS)
        if word >= len(self._words):
            self._words.extend(repeat(0, word + 1 - len(self._words)))
        self._words[word] |= 1 << bit

    def add_all(self, *args: int) -> None:
        """Add every value in ``args`` to the set."""
        for x in args:
            self.add(x)

    def remove(self, x: int) -> None:
        """Remove ``x`` from the set; values not in the set are ignored."""
        if x < 0:
            return
        word, bit = divmod(x, _WORD_BITS)
        if word < len(self._words):
            self._words[word] &= ~(1 << bit)

    def remove_all(self, *args: int) -> None:
        """Remove every value in ``args`` from the set."""
        for x in args:
            self.remove(x)

    def clear(self) -> None:
        """Remove all elements, keeping the allocated words."""
        self._words = [0] * len(self._words)

    def trim(self) -> None:
        """Release trailing empty words, keeping at least one."""
        while len(self._words) > 1 and self._words[-1] == 0:
            self._words.pop()

    def copy(self) -> IntSet:
        """Trim the set and return an independent copy of it."""
        self.trim()
        duplicate = IntSet()
        duplicate._words = list(self._words)
        return duplicate

    def _pad_to(self, other: IntSet) -> None:
        missing = len(other._words) - len(self._words)
        if missing > 0:
            self._words.extend(repeat(0, missing))

    def union_with(self, other: IntSet) -> None:
        """Set this set to the union of itself and ``other``."""
        self._pad_to(other)
        for index, word in enumerate(other._words):
            self._words[index] |= word

    def intersect_with(self, other: IntSet) -> None:
        """Set this set to the intersection of itself and ``other``."""
        self._words = [
            word & theirs for word, theirs in zip(self._words, chain(other._words, repeat(0)))
        ]

    def difference_with(self, other: IntSet) -> None:
        """Remove from this set every element of ``other``."""
        self._words = [
            word & ~theirs for word, theirs in zip(self._words, chain(other._words, repeat(0)))
        ]

    def symmetric_difference_with(self, other: IntSet) -> None:
        """Keep the elements found in exactly one of this set and ``other``."""
        self._pad_to(other)
        for index, word in enumerate(other._words):
            self._words[index] ^= word

    def elems(self) -> list[int]:
        """Return the elements of the set in increasing order."""
        return list(self)