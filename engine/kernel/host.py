"""
View Kernel — Host Document

The in-memory document views are materialized into. A Document owns a set of
named mount points; each MountPoint wraps one live container element and
exposes the four primitives the lifecycle layer needs:

  clear          — remove all contents
  insert_markup  — parse markup and insert it before the existing contents
  set_text       — replace one live text leaf's payload
  set_attribute  — set one attribute on one live element

Every primitive is recorded in the mount point's journal so callers can tell
a patched view from a re-materialized one.
"""

from __future__ import annotations

import logging

import chevron

from engine.kernel.nodes import flatten, parse_markup, serialize, serialize_children
from engine.kernel.types import ELEMENT, TEXT, Mutation, Node, element

logger = logging.getLogger(__name__)


class MountPointNotFound(Exception):
    """No mount point registered under that name."""
    pass


class MountPoint:
    """One live container in the host document."""

    def __init__(self, name: str, tag: str = "div", attributes: dict[str, str] | None = None) -> None:
        self.name = name
        self.root = element(tag, attributes)
        self.journal: list[Mutation] = []

    @classmethod
    def detached(cls, name: str = "detached") -> MountPoint:
        """A mount point that belongs to no document (fragment-only views)."""
        return cls(name)

    # -- primitives ---------------------------------------------------------

    def clear(self) -> None:
        self.root.children.clear()
        self.journal.append(Mutation(op="clear"))

    def insert_markup(self, markup: str) -> list[Node]:
        """Parse markup and insert the resulting nodes at the front."""
        nodes = parse_markup(markup).children
        self.root.children[0:0] = nodes
        self.journal.append(Mutation(op="insert", value=markup))
        return nodes

    def set_text(self, node: Node, text: str) -> None:
        if node.kind != TEXT:
            raise ValueError(f"set_text target must be a text leaf, got <{node.tag}>")
        node.text = text
        self.journal.append(Mutation(op="set_text", value=text))

    def set_attribute(self, node: Node, key: str, value: str) -> None:
        if node.kind != ELEMENT:
            raise ValueError(f"set_attribute target must be an element, got text {node.text!r}")
        node.attributes[key] = value
        self.journal.append(Mutation(op="set_attribute", target=f"{node.tag}[{key}]", value=value))

    # -- reads --------------------------------------------------------------

    @property
    def inner_html(self) -> str:
        return serialize_children(self.root)

    @property
    def outer_html(self) -> str:
        return serialize(self.root)

    def live_nodes(self) -> list[Node]:
        """The container followed by every node inside it, in pre-order."""
        return flatten(self.root)

    def find_all(self, class_name: str) -> list[Node]:
        """Elements whose class attribute contains class_name."""
        return [
            n
            for n in flatten(self.root)[1:]
            if n.kind == ELEMENT and class_name in n.attributes.get("class", "").split()
        ]

    def find(self, class_name: str) -> Node | None:
        found = self.find_all(class_name)
        return found[0] if found else None

    def toggle_class(self, class_name: str) -> None:
        """Add or remove a class on the container itself."""
        classes = self.root.attributes.get("class", "").split()
        if class_name in classes:
            classes.remove(class_name)
        else:
            classes.append(class_name)
        self.set_attribute(self.root, "class", " ".join(classes))

    def has_class(self, class_name: str) -> bool:
        return class_name in self.root.attributes.get("class", "").split()

    def mutations(self, op: str | None = None) -> list[Mutation]:
        return [m for m in self.journal if op is None or m.op == op]

    def __repr__(self) -> str:
        return f"MountPoint({self.name!r}, children={len(self.root.children)})"


class Document:
    """
    The host document: a page layout plus the mount points it embeds.

    The layout is a Mustache template; each mount point is available to it as
    a triple-stash variable named after the mount point.
    """

    def __init__(self, layout: str = "", title: str = "") -> None:
        self.layout = layout
        self.title = title
        self._mounts: dict[str, MountPoint] = {}

    def add_mount(self, name: str, tag: str = "div", attributes: dict[str, str] | None = None) -> MountPoint:
        if name in self._mounts:
            raise ValueError(f"Mount point {name!r} already exists")
        mount = MountPoint(name, tag, attributes)
        self._mounts[name] = mount
        logger.debug("document: mounted %s <%s>", name, tag)
        return mount

    def mount(self, name: str) -> MountPoint:
        try:
            return self._mounts[name]
        except KeyError:
            raise MountPointNotFound(name) from None

    @property
    def mounts(self) -> dict[str, MountPoint]:
        return dict(self._mounts)

    def to_html(self) -> str:
        """Render the whole document with every mount point's live content."""
        if not self.layout:
            return "\n".join(m.outer_html for m in self._mounts.values())
        context = {name: m.outer_html for name, m in self._mounts.items()}
        context["title"] = self.title
        return chevron.render(self.layout, context)
