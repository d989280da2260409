"""
View Kernel — Shared Types

Data classes used across nodes, reconciler, host, and lifecycle.
These are the contracts that bind the kernel together.

A Node Tree is plain data: element nodes with a tag, attributes and ordered
children, and text leaves with a text payload. Nodes carry no identity
across renders; two trees are compared position by position in pre-order.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# ---------------------------------------------------------------------------
# Node kinds
# ---------------------------------------------------------------------------

ELEMENT = "element"
TEXT = "text"

NODE_KINDS: set[str] = {ELEMENT, TEXT}

# Root tag of every produced tree; serializes as its children only
FRAGMENT = "#document-fragment"

VOID_TAGS: set[str] = {
    "area",
    "base",
    "br",
    "col",
    "embed",
    "hr",
    "img",
    "input",
    "link",
    "meta",
    "source",
    "track",
    "wbr",
}


# ---------------------------------------------------------------------------
# Lifecycle phases
# ---------------------------------------------------------------------------

EMPTY = "empty"
LOADING = "loading"
RENDERED = "rendered"
ERROR = "error"
MESSAGE = "message"

LIFECYCLE_PHASES: set[str] = {EMPTY, LOADING, RENDERED, ERROR, MESSAGE}


# ---------------------------------------------------------------------------
# Reconcile outcomes
# ---------------------------------------------------------------------------

NO_CHANGE = "no_change"
PATCH = "patch"
INCOMPATIBLE = "incompatible"


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass
class Node:
    """
    One element of a rendered tree.

    Element nodes use tag/attributes/children and leave text as None.
    Text leaves use text only and never have children.
    """

    kind: str = ELEMENT
    tag: str = ""
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)
    text: str | None = None

    @property
    def is_text(self) -> bool:
        return self.kind == TEXT

    @property
    def is_element(self) -> bool:
        return self.kind == ELEMENT

    def add_child(self, child: Node) -> Node:
        """Add a child node and return it for chaining."""
        if self.kind == TEXT:
            raise ValueError(f"Text leaf cannot have children, got {child!r}")
        self.children.append(child)
        return child


@dataclass(frozen=True)
class TextEdit:
    """Replace the text payload of the leaf at a flattened index."""

    index: int
    new_text: str


@dataclass(frozen=True)
class AttributeEdit:
    """Set every attribute in new_attributes on the element at a flattened index."""

    index: int
    new_attributes: dict[str, str]


@dataclass
class ReconcileResult:
    """
    Result of comparing a mounted tree with a freshly produced one.
    The reconciler never raises; it always returns one of these.
    """

    outcome: str
    text_edits: list[TextEdit] = field(default_factory=list)
    attribute_edits: list[AttributeEdit] = field(default_factory=list)
    reason: str | None = None

    @property
    def edit_count(self) -> int:
        return len(self.text_edits) + len(self.attribute_edits)


@dataclass(frozen=True)
class Mutation:
    """One primitive applied to a mount point, kept in its journal."""

    op: str  # "clear" | "insert" | "set_text" | "set_attribute"
    target: str = ""
    value: str = ""


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def element(
    tag: str,
    attributes: dict[str, str] | None = None,
    children: list[Node] | None = None,
) -> Node:
    """Build an element node."""
    return Node(kind=ELEMENT, tag=tag, attributes=dict(attributes or {}), children=list(children or []))


def text_leaf(text: str) -> Node:
    """Build a text leaf."""
    return Node(kind=TEXT, text=text)


def fragment(children: list[Node] | None = None) -> Node:
    """Build a fragment root holding top-level nodes."""
    return element(FRAGMENT, children=children)
