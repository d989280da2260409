"""Results view — the current page of search results."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from engine.kernel.host import MountPoint
from engine.kernel.lifecycle import ViewController
from engine.kernel.nodes import parse_markup
from engine.kernel.types import Node
from forkify.location import Location
from forkify.services.recipe_model import page_window
from forkify.views.preview import PreviewView


class ResultsView:
    """
    Accepts either the search entity {results, page, resultsPerPage}, shown
    one page at a time, or a ready-made list of results.
    """

    error_message = "No recipes found for your query! Please try again"
    message = ""

    def __init__(self, location: Location | None = None) -> None:
        self.preview = ViewController(MountPoint.detached("results-preview"), PreviewView(location))

    def produce_markup(self, entity: Mapping[str, Any] | list[dict[str, Any]]) -> Node:
        if isinstance(entity, Mapping):
            items = page_window(entity["results"], entity["page"], entity["resultsPerPage"])
        else:
            items = entity
        return parse_markup("".join(self.preview.render(r, materialize=False) or "" for r in items))
