"""Walks over HTML documents: links, counts, text, outlines and pretty printing."""

from __future__ import annotations

import sys
import urllib.request
from collections import Counter
from typing import TextIO

from toolbench.htmltree import Node, NodeType, parse

_IGNORED_COUNT_TAGS = frozenset({"html", "head", "body"})
_INVISIBLE_TAGS = frozenset({"script", "style"})

_GO_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def _is_element(node: Node, *tags: str) -> bool:
    return node.type is NodeType.ELEMENT and (not tags or node.data in tags)


def _quote(value: str) -> str:
    parts = []
    for ch in value:
        if ch in _GO_ESCAPES:
            parts.append(_GO_ESCAPES[ch])
        elif ch.isprintable():
            parts.append(ch)
        elif ord(ch) < 0x80:
            parts.append(f"\\x{ord(ch):02x}")
        elif ord(ch) <= 0xFFFF:
            parts.append(f"\\u{ord(ch):04x}")
        else:
            parts.append(f"\\U{ord(ch):08x}")
    return '"' + "".join(parts) + '"'


def _fetch_document(url: str) -> Node:
    with urllib.request.urlopen(url) as resp:
        charset = resp.headers.get_content_charset() or "utf-8"
        body = resp.read()
    return parse(body.decode(charset, errors="replace"))


def links(node: Node) -> list[str]:
    """Return the href of every <a> element, in document order."""
    return [
        value
        for n in node.iter()
        if _is_element(n, "a")
        for key, value in n.attrs
        if key == "href"
    ]


def resource_links(node: Node) -> list[str]:
    """Return every href and src attribute value, in document order."""
    return [value for n in node.iter() for key, value in n.attrs if key in ("href", "src")]


def count_elements(node: Node) -> dict[str, int]:
    """Count elements by tag name, leaving out html, head and body."""
    return dict(
        Counter(
            n.data for n in node.iter() if _is_element(n) and n.data not in _IGNORED_COUNT_TAGS
        )
    )


def _visible_nodes(node: Node):
    yield node
    if not _is_element(node, *_INVISIBLE_TAGS):
        for child in node.children:
            yield from _visible_nodes(child)


def print_text_content(node: Node, out: TextIO | None = None) -> None:
    """Write the stripped, non-empty text of every text node to ``out``.

    The contents of <script> and <style> elements are skipped.
    """
    out = sys.stdout if out is None else out
    for n in _visible_nodes(node):
        if n.type is NodeType.TEXT:
            text = n.data.strip()
            if text:
                out.write(text + "\n")


def count_words_and_images(node: Node) -> tuple[int, int]:
    """Return the number of words and of <img> elements outside script and style."""
    words = images = 0
    for n in _visible_nodes(node):
        if n.type is NodeType.TEXT:
            words += len(n.data.split())
        elif _is_element(n, "img"):
            images += 1
    return words, images


def count_words_and_images_at(url: str) -> tuple[int, int]:
    """Fetch the HTML document at ``url`` and count its words and images."""
    return count_words_and_images(_fetch_document(url))


def elements_by_tag_name(doc: Node, *args: str) -> list[Node]:
    """Return every element whose tag is one of ``args``, in document order."""
    return [n for n in doc.iter() if _is_element(n) and n.data in args]


def element_by_id(doc: Node, id: str) -> Node | None:
    """Return the first element whose id attribute equals ``id``, or None."""
    return next(
        (
            n
            for n in doc.iter()
            if _is_element(n) and any(k == "id" and v == id for k, v in n.attrs)
        ),
        None,
    )


def _write_outline(node: Node, depth: int, out: TextIO) -> None:
    if _is_element(node):
        pad = "  " * depth
        out.write(f"{pad}<{node.data}>\n")
        for child in node.children:
            _write_outline(child, depth + 1, out)
        out.write(f"{pad}</{node.data}>\n")
    else:
        for child in node.children:
            _write_outline(child, depth, out)


def outline(source, out: TextIO | None = None) -> None:
    """Parse ``source`` as HTML and write an indented outline of its elements."""
    _write_outline(parse(source), 0, sys.stdout if out is None else out)


def outline_url(url: str, out: TextIO | None = None) -> None:
    """Fetch the HTML document at ``url`` and write its outline."""
    _write_outline(_fetch_document(url), 0, sys.stdout if out is None else out)


def _write_pretty(node: Node, depth: int, out: TextIO) -> None:
    pad = "  " * depth
    if node.type is NodeType.ELEMENT:
        attrs = "".join(f" {key}={_quote(value)}" for key, value in node.attrs)
        has_close_tag = bool(node.children) and node.data != "img"
        self_closing = "/" if not node.children and node.data != "img" else ""
        out.write(f"{pad}<{node.data}{attrs}{self_closing}>\n")
        for child in node.children:
            _write_pretty(child, depth + 1, out)
        if has_close_tag:
            out.write(f"{pad}</{node.data}>\n")
    elif node.type is NodeType.TEXT:
        out.write(f"{pad}{node.data}\n")
    elif node.type is NodeType.COMMENT:
        out.write(f"{pad}<!--{node.data}-->\n")
    else:
        for child in node.children:
            _write_pretty(child, depth, out)


def pretty_print(source, out: TextIO | None = None) -> None:
    """Parse ``source`` as HTML and write it back indented, one node per line."""
    _write_pretty(parse(source), 0, sys.stdout if out is None else out)


def main(argv: list[str] | None = None) -> int:
    """Print the outline of the HTML document at each URL given."""
    urls = sys.argv[1:] if argv is None else argv
    for url in urls:
        try:
            outline_url(url)
        except (OSError, ValueError) as err:
            print(f"outline {url}: {err}", file=sys.stderr)
    return 0