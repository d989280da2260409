"""
Location — which recipe is currently selected.

In a browser this lives in the URL hash. Here it is a small mutable
object shared by the router (which writes it) and the preview view (which
only reads it to highlight the active result).
"""

from __future__ import annotations


class Location:
    def __init__(self, recipe_id: str = "") -> None:
        self.recipe_id = recipe_id

    @property
    def hash(self) -> str:
        return f"#{self.recipe_id}" if self.recipe_id else ""

    def navigate(self, recipe_id: str) -> None:
        self.recipe_id = recipe_id.lstrip("#")

    def __repr__(self) -> str:
        return f"Location({self.recipe_id!r})"
