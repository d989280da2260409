"""
Recipe model — application state and the operations that change it.

Views never see these objects directly; they receive the plain entity dicts
built here (recipe entity, search entity, bookmark list).
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Any

from forkify.config import settings
from forkify.models.recipe import NewRecipeForm, Recipe, SearchResult
from forkify.services.bookmark_store import BookmarkStore, MemoryBookmarkStore
from forkify.services.forkify_client import ForkifyClient

logger = logging.getLogger(__name__)


@dataclass
class SearchState:
    query: str = ""
    results: list[dict[str, Any]] = field(default_factory=list)
    page: int = 1
    results_per_page: int = 10

    def to_entity(self) -> dict[str, Any]:
        return {
            "query": self.query,
            "results": list(self.results),
            "page": self.page,
            "resultsPerPage": self.results_per_page,
        }


@dataclass
class AppState:
    recipe: dict[str, Any] = field(default_factory=dict)
    search: SearchState = field(default_factory=SearchState)
    bookmarks: list[dict[str, Any]] = field(default_factory=list)


def page_window(results: list[Any], page: int, per_page: int) -> list[Any]:
    """Items of a 1-based page: results[(page-1)*per_page : page*per_page]."""
    start = (page - 1) * per_page
    return results[start : page * per_page]


class RecipeModel:
    """Owns AppState; every mutation goes through here."""

    def __init__(
        self,
        client: ForkifyClient,
        store: BookmarkStore | None = None,
        results_per_page: int | None = None,
    ) -> None:
        self.client = client
        self.store = store or MemoryBookmarkStore()
        self.state = AppState(search=SearchState(results_per_page=results_per_page or settings.RES_PER_PAGE))

    # -- recipe -------------------------------------------------------------

    async def load_recipe(self, recipe_id: str) -> dict[str, Any]:
        data = await self.client.get_recipe(recipe_id)
        recipe = Recipe.from_response(data)
        self.state.recipe = recipe.to_entity(bookmarked=self.is_bookmarked(recipe.id))
        return self.state.recipe

    def update_servings(self, new_servings: int) -> None:
        """Scale every ingredient quantity from the current servings to new_servings."""
        recipe = self.state.recipe
        if not recipe or new_servings <= 0:
            return
        old = recipe["servings"]
        for ing in recipe["ingredients"]:
            if ing["quantity"] is not None:
                ing["quantity"] = ing["quantity"] * new_servings / old
        recipe["servings"] = new_servings

    # -- search -------------------------------------------------------------

    async def load_search_results(self, query: str) -> list[dict[str, Any]]:
        """Run a search. A failed search leaves the previous search state untouched."""
        data = await self.client.search(query)
        results = [r.to_entity() for r in SearchResult.list_from_response(data)]
        search = self.state.search
        search.query = query
        search.results = results
        search.page = 1
        logger.info("recipe_model: %d results for %r", len(search.results), query)
        return search.results

    def get_search_results_page(self, page: int | None = None) -> list[dict[str, Any]]:
        search = self.state.search
        if page is not None:
            search.page = page
        return page_window(search.results, search.page, search.results_per_page)

    # -- bookmarks ----------------------------------------------------------

    def is_bookmarked(self, recipe_id: str) -> bool:
        return any(b["id"] == recipe_id for b in self.state.bookmarks)

    def add_bookmark(self, recipe: dict[str, Any]) -> None:
        if self.state.recipe.get("id") == recipe["id"]:
            self.state.recipe["bookmarked"] = True
        self.state.bookmarks.append(copy.deepcopy(recipe))
        self._persist_bookmarks()

    def delete_bookmark(self, recipe_id: str) -> None:
        self.state.bookmarks = [b for b in self.state.bookmarks if b["id"] != recipe_id]
        if self.state.recipe.get("id") == recipe_id:
            self.state.recipe["bookmarked"] = False
        self._persist_bookmarks()

    def restore_bookmarks(self) -> None:
        self.state.bookmarks = self.store.load()
        logger.info("recipe_model: restored %d bookmarks", len(self.state.bookmarks))

    def _persist_bookmarks(self) -> None:
        self.store.save(self.state.bookmarks)

    # -- upload -------------------------------------------------------------

    async def upload_recipe(self, fields: dict[str, str]) -> dict[str, Any]:
        """Validate the form, upload it, make it the current recipe and bookmark it."""
        form = NewRecipeForm.from_form(fields)
        data = await self.client.upload(form.to_payload())
        recipe = Recipe.from_response(data)
        self.state.recipe = recipe.to_entity()
        self.add_bookmark(self.state.recipe)
        return self.state.recipe
