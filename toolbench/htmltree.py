"""A small HTML document tree built on the html5lib parser."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from xml.dom import Node as _DomNode

import html5lib


class NodeType(enum.Enum):
    """The kind of a node in a parsed HTML document."""

    DOCUMENT = "document"
    DOCTYPE = "doctype"
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"


@dataclass(eq=False)
class Node:
    """One node of a parsed HTML document.

    ``data`` is the tag name of an element, the text of a text or comment
    node, the name of a doctype, and empty for the document itself.
    """

    type: NodeType
    data: str = ""
    attrs: list[tuple[str, str]] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)
    parent: Node | None = field(default=None, repr=False)

    def attr(self, key: str) -> str | None:
        """Return the value of the first attribute named ``key``, or None."""
        return next((value for name, value in self.attrs if name == key), None)

    def iter(self) -> Iterator[Node]:
        """Yield this node and all its descendants in document order."""
        yield self
        for child in self.children:
            yield from child.iter()


_DOM_TYPES = {
    _DomNode.DOCUMENT_NODE: NodeType.DOCUMENT,
    _DomNode.DOCUMENT_TYPE_NODE: NodeType.DOCTYPE,
    _DomNode.ELEMENT_NODE: NodeType.ELEMENT,
    _DomNode.TEXT_NODE: NodeType.TEXT,
    _DomNode.CDATA_SECTION_NODE: NodeType.TEXT,
    _DomNode.COMMENT_NODE: NodeType.COMMENT,
}


def _convert(dom_node, parent: Node | None) -> Node | None:
    kind = _DOM_TYPES.get(dom_node.nodeType)
    if kind is None:
        return None
    if kind is NodeType.ELEMENT:
        node = Node(kind, dom_node.tagName, list(dom_node.attributes.items()), parent=parent)
    elif kind in (NodeType.TEXT, NodeType.COMMENT):
        node = Node(kind, dom_node.data, parent=parent)
    elif kind is NodeType.DOCTYPE:
        node = Node(kind, dom_node.name or "", parent=parent)
    else:
        node = Node(kind, parent=parent)
    for dom_child in dom_node.childNodes:
        child = _convert(dom_child, node)
        if child is not None:
            node.children.append(child)
    return node


def parse(source) -> Node:
    """Parse HTML from a string, bytes or a readable file into a document node."""
    dom = html5lib.parse(source, treebuilder="dom", namespaceHTMLElements=False)
    return _convert(dom, None)


def for_each_node(
    node: Node,
    pre: Callable[[Node], object] | None = None,
    post: Callable[[Node], object] | None = None,
) -> bool:
    """Call ``pre`` before and ``post`` after visiting the children of each node.

    Both callbacks are optional. A callback that returns False stops the walk;
    the function then returns False, otherwise True.
    """
    if pre is not None and pre(node) is False:
        return False
    for child in node.children:
        if not for_each_node(child, pre, post):
            return False
    if post is not None and post(node) is False:
        return False
    return True