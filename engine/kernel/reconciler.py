"""
View Kernel — Reconciler

Pure function: (previous tree, next tree) → ReconcileResult
No IO. Deterministic.

Both trees are flattened in pre-order and paired by index. Node identity is
purely positional, so any change in shape (a list gaining or losing an item,
an element swapped for another tag) makes the pairing unsafe; the result is
then INCOMPATIBLE and the caller re-materializes from scratch. When the shape
is stable, the result lists only the text leaves and attribute sets that
differ.
"""

from __future__ import annotations

from engine.kernel.nodes import flatten
from engine.kernel.types import (
    INCOMPATIBLE,
    NO_CHANGE,
    PATCH,
    TEXT,
    AttributeEdit,
    Node,
    ReconcileResult,
    TextEdit,
)


def reconcile(previous: Node, next_tree: Node) -> ReconcileResult:
    """
    Compare two trees position by position.

    Returns NO_CHANGE when nothing differs, PATCH with the collected edits
    when only text payloads and attribute values differ, and INCOMPATIBLE
    (with a reason) as soon as the shapes diverge.
    """
    prev_nodes = flatten(previous)
    next_nodes = flatten(next_tree)

    if len(prev_nodes) != len(next_nodes):
        return ReconcileResult(
            outcome=INCOMPATIBLE,
            reason=f"node count changed: {len(prev_nodes)} -> {len(next_nodes)}",
        )

    text_edits: list[TextEdit] = []
    attribute_edits: list[AttributeEdit] = []

    # Each index compares one node shallowly; descendants get their own index.
    for i, (old, new) in enumerate(zip(prev_nodes, next_nodes)):
        if old.kind != new.kind:
            return ReconcileResult(
                outcome=INCOMPATIBLE,
                reason=f"kind mismatch at {i}: {old.kind} -> {new.kind}",
            )

        if old.kind == TEXT:
            if old.text != new.text:
                text_edits.append(TextEdit(index=i, new_text=new.text or ""))
            continue

        if old.tag != new.tag:
            return ReconcileResult(
                outcome=INCOMPATIBLE,
                reason=f"tag mismatch at {i}: <{old.tag}> -> <{new.tag}>",
            )

        # Same node count overall but a different child count here means the
        # positions below this element no longer line up.
        if len(old.children) != len(new.children):
            return ReconcileResult(
                outcome=INCOMPATIBLE,
                reason=f"child count changed at {i} <{old.tag}>: {len(old.children)} -> {len(new.children)}",
            )

        if old.attributes != new.attributes:
            attribute_edits.append(AttributeEdit(index=i, new_attributes=dict(new.attributes)))

    if not text_edits and not attribute_edits:
        return ReconcileResult(outcome=NO_CHANGE)

    return ReconcileResult(outcome=PATCH, text_edits=text_edits, attribute_edits=attribute_edits)
