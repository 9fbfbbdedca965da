"""Topological sorting and breadth-first traversal of string graphs."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping

Graph = Mapping[str, "Iterable[str] | None"]


class CycleError(ValueError):
    """Raised when a graph that must be acyclic has a cycle.

    ``order`` holds the ordering computed despite the cycle.
    """

    def __init__(self, order: list[str]) -> None:
        super().__init__("graph contains a cycle")
        self.order = order


def _depth_first(graph: Graph, roots: Iterable[str]) -> list[str]:
    order: list[str] = []
    seen: set[str] = set()

    def visit_all(items: Iterable[str]) -> None:
        for item in items:
            if item not in seen:
                seen.add(item)
                visit_all(graph.get(item) or ())
                order.append(item)

    visit_all(roots)
    return order


def topo_sort(graph: Graph) -> list[str]:
    """Order the nodes of ``graph`` so each comes after all its prerequisites."""
    return _depth_first(graph, graph)


def topo_sort_sorted(graph: Graph) -> list[str]:
    """Like topo_sort, but start from the keys in sorted order."""
    return _depth_first(graph, sorted(graph))


def topo_sort_strict(graph: Graph) -> list[str]:
    """Like topo_sort, but raise CycleError if the graph has a cycle."""
    order: list[str] = []
    seen: set[str] = set()
    on_path: set[str] = set()
    cyclic = False

    def visit_all(items: Iterable[str]) -> None:
        nonlocal cyclic
        for item in items:
            if item in on_path:
                cyclic = True
            if item not in seen:
                seen.add(item)
                on_path.add(item)
                visit_all(graph.get(item) or ())
                on_path.discard(item)
                order.append(item)

    visit_all(graph)
    if cyclic:
        raise CycleError(order)
    return order


def breadth_first(f: Callable[[str], Iterable[str] | None], worklist: Iterable[str]) -> None:
    """Call ``f`` on each item, breadth first, adding what it returns to the work.

    ``f`` is called at most once for each item.
    """
    seen: set[str] = set()
    items = list(worklist)
    while items:
        next_items: list[str] = []
        for item in items:
            if item not in seen:
                seen.add(item)
                next_items.extend(f(item) or ())
        items = next_items