"""An unbalanced binary search tree of integers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class Tree:
    """A node of a binary search tree; equal values go to the right."""

    value: int
    left: Tree | None = None
    right: Tree | None = None

    def __str__(self) -> str:
        return format_tree(self)

    def values(self) -> Iterator[int]:
        """Yield the values of the tree in increasing order."""
        if self.left is not None:
            yield from self.left.values()
        yield self.value
        if self.right is not None:
            yield from self.right.values()


def add(tree: Tree | None, value: int) -> Tree:
    """Insert ``value`` into ``tree`` and return the root, creating it if None."""
    if tree is None:
        return Tree(value)
    if value < tree.value:
        tree.left = add(tree.left, value)
    else:
        tree.right = add(tree.right, value)
    return tree


def format_tree(tree: Tree | None) -> str:
    """Return the values of ``tree`` in order, as "[ 1 2 3 ]"; "[ ]" if empty."""
    values = [] if tree is None else list(tree.values())
    return "[" + "".join(f" {v}" for v in values) + " ]"