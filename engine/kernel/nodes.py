"""
View Kernel — Node Tree operations

Pure functions over Node trees:
  deep_equals — structural equality
  flatten     — pre-order traversal into a flat list
  serialize   — Node tree → markup string
  parse_markup — markup string → fragment-rooted Node tree

No IO. parse_markup(serialize(tree)) is structurally equal to tree for any
tree that came out of parse_markup.
"""

from __future__ import annotations

import re
from html import escape as _html_escape
from html.parser import HTMLParser

from engine.kernel.types import (
    ELEMENT,
    FRAGMENT,
    TEXT,
    VOID_TAGS,
    Node,
    element,
    fragment,
    text_leaf,
)

_WHITESPACE_RE = re.compile(r"\s+")


# ---------------------------------------------------------------------------
# Comparison and traversal
# ---------------------------------------------------------------------------


def deep_equals(a: Node, b: Node) -> bool:
    """
    Recursive structural equality.

    Attributes compare as key/value pairs regardless of insertion order;
    children compare pairwise in order.
    """
    if a.kind != b.kind:
        return False
    if a.kind == TEXT:
        return a.text == b.text
    if a.tag != b.tag or a.attributes != b.attributes:
        return False
    if len(a.children) != len(b.children):
        return False
    return all(deep_equals(x, y) for x, y in zip(a.children, b.children))


def flatten(tree: Node) -> list[Node]:
    """Pre-order traversal: a node, then each child's subtree in order."""
    result: list[Node] = []
    stack = [tree]
    while stack:
        node = stack.pop()
        result.append(node)
        stack.extend(reversed(node.children))
    return result


def text_content(tree: Node) -> str:
    """Concatenated text of every leaf under tree."""
    return "".join(n.text or "" for n in flatten(tree) if n.kind == TEXT)


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


def escape(text: str) -> str:
    """HTML-escape text content."""
    return _html_escape(str(text), quote=False)


def escape_attr(value: str) -> str:
    """HTML-escape an attribute value."""
    return _html_escape(str(value), quote=True)


def serialize(tree: Node) -> str:
    """Serialize a Node tree to markup. Fragment roots emit their children only."""
    parts: list[str] = []
    _serialize_into(tree, parts)
    return "".join(parts)


def serialize_children(tree: Node) -> str:
    """Serialize only the children of tree (a container's inner markup)."""
    parts: list[str] = []
    for child in tree.children:
        _serialize_into(child, parts)
    return "".join(parts)


def _serialize_into(node: Node, parts: list[str]) -> None:
    if node.kind == TEXT:
        parts.append(escape(node.text or ""))
        return

    if node.tag == FRAGMENT:
        for child in node.children:
            _serialize_into(child, parts)
        return

    attrs = "".join(f' {k}="{escape_attr(v)}"' for k, v in node.attributes.items())
    parts.append(f"<{node.tag}{attrs}>")
    if node.tag in VOID_TAGS:
        return
    for child in node.children:
        _serialize_into(child, parts)
    parts.append(f"</{node.tag}>")


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class _TreeBuilder(HTMLParser):
    """Builds a fragment-rooted Node tree from a markup string."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.root = fragment()
        self._stack: list[Node] = [self.root]
        self._pending: list[str] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self._flush_text()
        node = element(tag, {k: v if v is not None else "" for k, v in attrs})
        self._stack[-1].add_child(node)
        if tag not in VOID_TAGS:
            self._stack.append(node)

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self._flush_text()
        self._stack[-1].add_child(element(tag, {k: v if v is not None else "" for k, v in attrs}))

    def handle_endtag(self, tag: str) -> None:
        self._flush_text()
        if tag in VOID_TAGS:
            return
        # Close up to the nearest matching open tag; stray end tags are ignored
        for depth in range(len(self._stack) - 1, 0, -1):
            if self._stack[depth].tag == tag:
                del self._stack[depth:]
                return

    def handle_data(self, data: str) -> None:
        self._pending.append(data)

    def close(self) -> None:
        super().close()
        self._flush_text()

    def _flush_text(self) -> None:
        if not self._pending:
            return
        data = "".join(self._pending)
        self._pending.clear()
        if not data.strip():
            return
        self._stack[-1].add_child(text_leaf(_WHITESPACE_RE.sub(" ", data)))


def parse_markup(markup: str) -> Node:
    """
    Parse markup into a fragment-rooted Node tree.

    Whitespace-only text between tags is dropped and whitespace runs inside
    text collapse to a single space. Unclosed tags are closed at the end.
    """
    builder = _TreeBuilder()
    builder.feed(markup)
    builder.close()
    return builder.root


def clone(tree: Node) -> Node:
    """Deep copy of a Node tree."""
    if tree.kind == TEXT:
        return text_leaf(tree.text or "")
    return Node(
        kind=ELEMENT,
        tag=tree.tag,
        attributes=dict(tree.attributes),
        children=[clone(c) for c in tree.children],
    )
