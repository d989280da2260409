"""
View Kernel — the incremental view reconciliation engine.

Four components:
  nodes       — Node tree equality, flattening, markup parse/serialize
  reconciler  — (mounted tree, next tree) → NoChange | Patch | Incompatible
  host        — Document and MountPoint: the live trees views write into
  lifecycle   — ViewController: render / update / status views per mount point

Plus events — publish/subscribe registration for external triggers.
"""

from engine.kernel.events import EventBus
from engine.kernel.host import Document, MountPoint, MountPointNotFound
from engine.kernel.lifecycle import MarkupProducer, ViewController, is_empty_entity
from engine.kernel.nodes import deep_equals, flatten, parse_markup, serialize
from engine.kernel.reconciler import reconcile
from engine.kernel.types import (
    ERROR,
    INCOMPATIBLE,
    LOADING,
    MESSAGE,
    NO_CHANGE,
    PATCH,
    RENDERED,
    EMPTY,
    AttributeEdit,
    Node,
    ReconcileResult,
    TextEdit,
    element,
    fragment,
    text_leaf,
)

__all__ = [
    "EventBus",
    "Document",
    "MountPoint",
    "MountPointNotFound",
    "MarkupProducer",
    "ViewController",
    "is_empty_entity",
    "deep_equals",
    "flatten",
    "parse_markup",
    "serialize",
    "reconcile",
    "Node",
    "TextEdit",
    "AttributeEdit",
    "ReconcileResult",
    "element",
    "fragment",
    "text_leaf",
    "EMPTY",
    "LOADING",
    "RENDERED",
    "ERROR",
    "MESSAGE",
    "NO_CHANGE",
    "PATCH",
    "INCOMPATIBLE",
]
