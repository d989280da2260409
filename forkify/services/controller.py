"""
Application controller — wires the recipe model to the views.

One ViewController per mount point of the host document, built once when the
application starts. External triggers (routes, timers) never call the views
directly; they publish an event on the bus and the handlers registered in
init() decide what to render.

Events:
  load        — first page load: bookmarks, upload form, selected recipe
  hashchange  — a recipe was selected (recipe id)
  search      — a search was submitted (query)
  paginate    — a pagination button was used (page)
  servings    — a servings button was used (new servings)
  bookmark    — the bookmark button was used
  upload      — the upload form was submitted (form fields)
  modal       — the add-recipe window was opened or closed
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from engine.kernel.events import EventBus
from engine.kernel.host import Document
from engine.kernel.lifecycle import ViewController
from engine.kernel.types import RENDERED
from forkify.config import settings
from forkify.location import Location
from forkify.models.recipe import IngredientFormatError
from forkify.services.forkify_client import ApiError, RequestTimeout
from forkify.services.recipe_model import RecipeModel
from forkify.views import (
    AddRecipeView,
    BookmarksView,
    PaginationView,
    RecipeView,
    ResultsView,
)
from forkify.views.add_recipe import empty_form
from forkify.views.pagination import num_pages

logger = logging.getLogger(__name__)

# What the data layer raises for a recipe that cannot be shown
DATA_ERRORS = (RequestTimeout, ApiError, httpx.HTTPError, ValidationError, KeyError, ValueError)

START_MESSAGE = "Start by searching for a recipe or an ingredient. Have fun!"

LAYOUT = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{{title}}</title>
  <link rel="stylesheet" href="/static/style.css">
</head>
<body>
<div class="container">
  <header class="header">
    <form class="search" action="/search" method="get">
      <input type="text" name="query" class="search__field" placeholder="Search over 1,000,000 recipes...">
      <button class="btn search__btn"><span>Search</span></button>
    </form>
    <nav class="nav">
      <div class="bookmarks">{{{bookmarks}}}</div>
    </nav>
  </header>
  <div class="search-results">
    {{{results}}}
    {{{pagination}}}
  </div>
  {{{recipe}}}
</div>
{{{overlay}}}
{{{add_recipe_window}}}
</body>
</html>
"""


def build_document(title: str = "forkify // Search over 1,000,000 recipes") -> Document:
    """The page with one mount point per view."""
    doc = Document(layout=LAYOUT, title=title)
    doc.add_mount("bookmarks", "ul", {"class": "bookmarks__list"})
    doc.add_mount("results", "ul", {"class": "results"})
    doc.add_mount("pagination", "div", {"class": "pagination"})
    doc.add_mount("recipe", "div", {"class": "recipe"})
    doc.add_mount("overlay", "div", {"class": "overlay hidden"})
    doc.add_mount("add_recipe_window", "div", {"class": "add-recipe-window hidden"})
    return doc


class ForkifyApp:
    """The running application: model, document, views and event wiring."""

    def __init__(
        self,
        model: RecipeModel,
        document: Document | None = None,
        location: Location | None = None,
        *,
        modal_close_sec: float | None = None,
    ) -> None:
        self.model = model
        self.document = document or build_document()
        self.location = location or Location()
        self.bus = EventBus()
        self.modal_close_sec = modal_close_sec if modal_close_sec is not None else settings.MODAL_CLOSE_SEC
        self._close_handle: asyncio.TimerHandle | None = None

        icons = settings.ICONS_URL
        doc = self.document
        self.recipe_view = ViewController(doc.mount("recipe"), RecipeView(), icons_url=icons)
        self.results_view = ViewController(doc.mount("results"), ResultsView(self.location), icons_url=icons)
        self.pagination_view = ViewController(doc.mount("pagination"), PaginationView(), icons_url=icons)
        self.bookmarks_view = ViewController(doc.mount("bookmarks"), BookmarksView(self.location), icons_url=icons)
        self.add_recipe_view = ViewController(
            doc.mount("add_recipe_window"), AddRecipeView(), name="AddRecipeView", icons_url=icons
        )
        self.overlay = doc.mount("overlay")
        self.window = doc.mount("add_recipe_window")

    def init(self) -> None:
        """Restore saved bookmarks and register every handler."""
        self.model.restore_bookmarks()
        self.bus.subscribe("load", self.control_load)
        self.bus.subscribe("hashchange", self.control_recipes)
        self.bus.subscribe("search", self.control_search_results)
        self.bus.subscribe("paginate", self.control_pagination)
        self.bus.subscribe("servings", self.control_servings)
        self.bus.subscribe("bookmark", self.control_toggle_bookmark)
        self.bus.subscribe("upload", self.control_add_recipe)
        self.bus.subscribe("modal", self.toggle_window)

    async def start(self) -> None:
        self.init()
        await self.bus.emit("load")

    async def shutdown(self) -> None:
        if self._close_handle is not None:
            self._close_handle.cancel()
        await self.model.client.aclose()

    def html(self) -> str:
        return self.document.to_html()

    # -----------------------------------------------------------------------
    # Handlers
    # -----------------------------------------------------------------------

    async def control_load(self) -> None:
        self.control_bookmarks()
        self.add_recipe_view.render(empty_form())
        if self.location.recipe_id:
            await self.control_recipes(self.location.recipe_id)
        else:
            self.recipe_view.render_message(START_MESSAGE)

    async def control_recipes(self, recipe_id: str | None = None) -> None:
        if recipe_id:
            self.location.navigate(recipe_id)
        recipe_id = self.location.recipe_id
        if not recipe_id:
            return

        self.recipe_view.render_loading()

        # Highlight the selected recipe wherever it is listed; a search error stays on screen
        if self.model.state.search.results and self.results_view.phase == RENDERED:
            self.results_view.update(self.model.state.search.to_entity())
        self.bookmarks_view.update(self.model.state.bookmarks)

        try:
            await self.model.load_recipe(recipe_id)
        except DATA_ERRORS as e:
            logger.warning("controller: could not load recipe %s: %s", recipe_id, e)
            self.recipe_view.render_error()
            return

        self.recipe_view.render(self.model.state.recipe)

    async def control_search_results(self, query: str) -> None:
        query = (query or "").strip()
        if not query:
            return

        self.results_view.render_loading()
        try:
            await self.model.load_search_results(query)
        except DATA_ERRORS as e:
            logger.warning("controller: search %r failed: %s", query, e)
            self.results_view.render_error()
            return

        search = self.model.state.search.to_entity()
        if search["results"]:
            self.results_view.render(search)
        else:
            self.results_view.render_error()
        self.pagination_view.render(search)

    def control_pagination(self, goto_page: int) -> None:
        search = self.model.state.search
        if not search.results or not 1 <= goto_page <= num_pages(len(search.results), search.results_per_page):
            logger.info("controller: ignoring page %s", goto_page)
            return
        self.model.get_search_results_page(goto_page)
        entity = search.to_entity()
        self.results_view.update(entity)
        self.pagination_view.update(entity)

    def control_servings(self, new_servings: int) -> None:
        if new_servings <= 0 or not self.model.state.recipe:
            return
        self.model.update_servings(new_servings)
        self.recipe_view.update(self.model.state.recipe)

    def control_toggle_bookmark(self) -> None:
        recipe = self.model.state.recipe
        if not recipe:
            return
        if recipe.get("bookmarked"):
            self.model.delete_bookmark(recipe["id"])
        else:
            self.model.add_bookmark(recipe)
        self.recipe_view.update(recipe)
        self.control_bookmarks()

    def control_bookmarks(self) -> None:
        self.bookmarks_view.render(self.model.state.bookmarks)

    async def control_add_recipe(self, fields: dict[str, Any]) -> None:
        self.add_recipe_view.render_loading()
        try:
            recipe = await self.model.upload_recipe(fields)
        except IngredientFormatError as e:
            self.add_recipe_view.render_error(str(e))
            return
        except DATA_ERRORS as e:
            logger.warning("controller: upload failed: %s", e)
            self.add_recipe_view.render_error()
            return

        self.location.navigate(recipe["id"])
        self.recipe_view.render(recipe)
        self.add_recipe_view.render_message()
        self.control_bookmarks()
        self._schedule_close()

    # -----------------------------------------------------------------------
    # Add-recipe window
    # -----------------------------------------------------------------------

    @property
    def window_open(self) -> bool:
        return not self.window.has_class("hidden")

    def toggle_window(self) -> None:
        self.overlay.toggle_class("hidden")
        self.window.toggle_class("hidden")

    def _schedule_close(self) -> None:
        loop = asyncio.get_running_loop()
        if self._close_handle is not None:
            self._close_handle.cancel()
        self._close_handle = loop.call_later(self.modal_close_sec, self._close_window)

    def _close_window(self) -> None:
        self._close_handle = None
        if self.window_open:
            self.toggle_window()
        self.add_recipe_view.render(empty_form())
