"""
View Kernel — Lifecycle Controller

One ViewController per mount point. It owns the last accepted entity and the
tree currently reflected in the mount point, and drives the view's markup
producer and the reconciler:

  render         — validate, produce, replace the mount point's contents
  update         — validate, produce, reconcile, then patch in place or
                   fall back to render
  render_loading / render_error / render_message — replace the contents
                   with a status view

All operations run synchronously to completion. Expected conditions (empty
entities, shape changes) never raise; a producer that raises propagates.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Protocol

import chevron

from engine.kernel.nodes import flatten, parse_markup, serialize
from engine.kernel.reconciler import reconcile
from engine.kernel.host import MountPoint
from engine.kernel.types import (
    EMPTY,
    ERROR,
    INCOMPATIBLE,
    LOADING,
    MESSAGE,
    NO_CHANGE,
    RENDERED,
    Node,
)

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Something went wrong. Please try again!"
DEFAULT_ICONS_URL = "icons.svg"

SPINNER_TEMPLATE = """
<div class="spinner">
  <svg><use href="{{icons}}#icon-loader"></use></svg>
</div>
"""

ERROR_TEMPLATE = """
<div class="error">
  <div><svg><use href="{{icons}}#icon-alert-triangle"></use></svg></div>
  <p>{{message}}</p>
</div>
"""

MESSAGE_TEMPLATE = """
<div class="message">
  <div><svg><use href="{{icons}}#icon-smile"></use></svg></div>
  <p>{{message}}</p>
</div>
"""


class MarkupProducer(Protocol):
    """What a concrete view supplies: a deterministic entity → tree function."""

    error_message: str
    message: str

    def produce_markup(self, entity: Any) -> Node: ...


def is_empty_entity(entity: Any) -> bool:
    """Absent, or a sequence with no elements."""
    if entity is None:
        return True
    if isinstance(entity, Sequence) and not isinstance(entity, str | bytes):
        return len(entity) == 0
    return False


class ViewController:
    """Keeps one mount point in sync with the entities handed to its view."""

    def __init__(
        self,
        mount: MountPoint,
        view: MarkupProducer,
        *,
        name: str | None = None,
        icons_url: str = DEFAULT_ICONS_URL,
    ) -> None:
        self._mount = mount
        self.view = view
        self.name = name or type(view).__name__
        self.icons_url = icons_url
        self.phase = EMPTY
        self.last_entity: Any = None
        self.last_tree: Node | None = None

    @property
    def mount(self) -> MountPoint:
        return self._mount

    # -----------------------------------------------------------------------
    # Full materialization
    # -----------------------------------------------------------------------

    def render(self, entity: Any, materialize: bool = True) -> str | None:
        """
        Produce the view for entity.

        With materialize=False the serialized markup is returned and neither
        the mount point nor the controller state is touched. An empty entity
        renders the error view and returns None.
        """
        if is_empty_entity(entity):
            self.render_error()
            return None

        markup, tree = self._produce(entity)
        if not materialize:
            return markup

        self._mount.clear()
        self._mount.insert_markup(markup)
        self.last_entity = entity
        self.last_tree = tree
        self.phase = RENDERED
        return markup

    # -----------------------------------------------------------------------
    # Incremental update
    # -----------------------------------------------------------------------

    def update(self, entity: Any) -> None:
        """Patch the mounted view to reflect entity; no-op for empty entities."""
        if is_empty_entity(entity):
            return

        if self.last_tree is None or self.phase != RENDERED:
            # Nothing of ours is on screen to patch
            self.render(entity)
            return

        _, next_tree = self._produce(entity)
        result = reconcile(self.last_tree, next_tree)

        if result.outcome == NO_CHANGE:
            self.last_entity = entity
            self.last_tree = next_tree
            return

        if result.outcome == INCOMPATIBLE:
            logger.debug("view %s: %s, re-rendering", self.name, result.reason)
            self.render(entity)
            return

        live = self._mount.live_nodes()
        if len(live) != len(flatten(self.last_tree)):
            logger.warning("view %s: mount point %s changed outside the view, re-rendering", self.name, self._mount.name)
            self.render(entity)
            return

        for edit in result.text_edits:
            self._mount.set_text(live[edit.index], edit.new_text)

        # Stale attributes missing from new_attributes are left in place
        for edit in result.attribute_edits:
            target = live[edit.index]
            for key, value in edit.new_attributes.items():
                if target.attributes.get(key) != value:
                    self._mount.set_attribute(target, key, value)

        logger.debug(
            "view %s: patched %d text, %d attribute edits",
            self.name,
            len(result.text_edits),
            len(result.attribute_edits),
        )
        self.last_entity = entity
        self.last_tree = next_tree

    def _produce(self, entity: Any) -> tuple[str, Node]:
        """
        Markup for entity and the tree the mount point will actually hold.

        Adjacent text leaves merge and blank leaves disappear when markup is
        inserted, so trees are compared in their parsed form.
        """
        markup = serialize(self.view.produce_markup(entity))
        return markup, parse_markup(markup)

    # -----------------------------------------------------------------------
    # Status views
    # -----------------------------------------------------------------------

    def render_loading(self) -> None:
        self._replace(chevron.render(SPINNER_TEMPLATE, {"icons": self.icons_url}))
        self.phase = LOADING

    def render_error(self, message: str | None = None) -> None:
        text = message if message is not None else (self.view.error_message or DEFAULT_ERROR_MESSAGE)
        self._replace(chevron.render(ERROR_TEMPLATE, {"icons": self.icons_url, "message": text}))
        self.phase = ERROR

    def render_message(self, message: str | None = None) -> None:
        text = message if message is not None else self.view.message
        self._replace(chevron.render(MESSAGE_TEMPLATE, {"icons": self.icons_url, "message": text}))
        self.phase = MESSAGE

    def _replace(self, markup: str) -> None:
        self._mount.clear()
        self._mount.insert_markup(markup)

    def __repr__(self) -> str:
        return f"ViewController({self.name!r}, phase={self.phase!r}, mount={self._mount.name!r})"
