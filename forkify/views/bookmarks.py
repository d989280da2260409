"""Bookmarks view — every bookmarked recipe as a preview."""

from __future__ import annotations

from typing import Any

from engine.kernel.host import MountPoint
from engine.kernel.lifecycle import ViewController
from engine.kernel.nodes import parse_markup
from engine.kernel.types import Node
from forkify.location import Location
from forkify.views.preview import PreviewView


class BookmarksView:
    error_message = "No bookmarks yet. Find a nice recipe and bookmark it :)"
    message = ""

    def __init__(self, location: Location | None = None) -> None:
        self.preview = ViewController(MountPoint.detached("bookmarks-preview"), PreviewView(location))

    def produce_markup(self, bookmarks: list[dict[str, Any]]) -> Node:
        return parse_markup("".join(self.preview.render(b, materialize=False) or "" for b in bookmarks))
