"""
Page routes — every route publishes one event and returns the whole document.

The routes stand in for the browser events of a client-side app: following a
recipe link, submitting the search form, clicking a pagination, servings or
bookmark button, submitting the upload form.
"""

from __future__ import annotations

from fastapi import APIRouter, Query, Request
from fastapi.responses import HTMLResponse

from forkify.services.controller import ForkifyApp

router = APIRouter(tags=["pages"])


def _forkify(request: Request) -> ForkifyApp:
    return request.app.state.forkify


def _page(forkify: ForkifyApp) -> HTMLResponse:
    return HTMLResponse(content=forkify.html(), headers={"Cache-Control": "no-store"})


@router.get("/", response_class=HTMLResponse)
async def index(request: Request) -> HTMLResponse:
    """Current state of the document."""
    return _page(_forkify(request))


@router.get("/recipes/{recipe_id}", response_class=HTMLResponse)
async def show_recipe(recipe_id: str, request: Request) -> HTMLResponse:
    forkify = _forkify(request)
    await forkify.bus.emit("hashchange", recipe_id)
    return _page(forkify)


@router.get("/search", response_class=HTMLResponse)
async def search(request: Request, query: str = Query(default="", max_length=200)) -> HTMLResponse:
    forkify = _forkify(request)
    await forkify.bus.emit("search", query)
    return _page(forkify)


@router.get("/search/page/{page}", response_class=HTMLResponse)
async def paginate(page: int, request: Request) -> HTMLResponse:
    forkify = _forkify(request)
    await forkify.bus.emit("paginate", page)
    return _page(forkify)


@router.post("/servings/{servings}", response_class=HTMLResponse)
async def update_servings(servings: int, request: Request) -> HTMLResponse:
    forkify = _forkify(request)
    await forkify.bus.emit("servings", servings)
    return _page(forkify)


@router.post("/bookmarks/toggle", response_class=HTMLResponse)
async def toggle_bookmark(request: Request) -> HTMLResponse:
    forkify = _forkify(request)
    await forkify.bus.emit("bookmark")
    return _page(forkify)


@router.post("/add-recipe/toggle", response_class=HTMLResponse)
async def toggle_add_recipe(request: Request) -> HTMLResponse:
    forkify = _forkify(request)
    await forkify.bus.emit("modal")
    return _page(forkify)


@router.post("/recipes", response_class=HTMLResponse)
async def upload_recipe(fields: dict[str, str], request: Request) -> HTMLResponse:
    """Upload form fields as JSON: title, sourceUrl, image, publisher, cookingTime, servings, ingredient-N."""
    forkify = _forkify(request)
    await forkify.bus.emit("upload", fields)
    return _page(forkify)
