"""
Pytest configuration and fixtures for Forkify tests.

The recipe API is replaced by FakeForkifyApi behind httpx.MockTransport, so
the real ForkifyClient code path (params, JSON, status handling, timeout race)
runs in every test without network access.
"""

from __future__ import annotations

import json
import os

# Set test environment variables before importing config
os.environ.setdefault("FORKIFY_API_URL", "https://forkify.test/api/v2/recipes")
os.environ.setdefault("FORKIFY_API_KEY", "test-key")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

import httpx
import pytest

from forkify.services.bookmark_store import MemoryBookmarkStore
from forkify.services.controller import ForkifyApp
from forkify.services.forkify_client import ForkifyClient
from forkify.services.recipe_model import RecipeModel

API_URL = "https://forkify.test/api/v2/recipes"


class FakeForkifyApi:
    """
    In-memory stand-in for the recipe API.

    GET  /recipes?search=q  → recipes whose title contains q
    GET  /recipes/{id}      → one recipe, 400 if unknown
    POST /recipes           → stores the body as a new recipe with the caller's key
    """

    def __init__(self) -> None:
        self.recipes: dict[str, dict] = {}
        self.requests: list[httpx.Request] = []
        self.uploads: list[dict] = []

    def add_recipe(
        self,
        recipe_id: str,
        title: str,
        servings: int = 4,
        ingredients: list[dict] | None = None,
        key: str | None = None,
    ) -> dict:
        recipe = {
            "id": recipe_id,
            "title": title,
            "publisher": "Test Kitchen",
            "source_url": f"https://kitchen.test/{recipe_id}",
            "image_url": f"https://img.test/{recipe_id}.jpg",
            "servings": servings,
            "cooking_time": 45,
            "ingredients": ingredients if ingredients is not None else [],
        }
        if key:
            recipe["key"] = key
        self.recipes[recipe_id] = recipe
        return recipe

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        segments = [s for s in request.url.path.split("/") if s]

        if request.method == "POST":
            body = json.loads(request.content)
            self.uploads.append(body)
            recipe_id = f"upload-{len(self.uploads)}"
            recipe = {**body, "id": recipe_id, "key": request.url.params.get("key", "")}
            self.recipes[recipe_id] = recipe
            return httpx.Response(201, json={"status": "success", "data": {"recipe": recipe}})

        if segments[-1] != "recipes":
            recipe = self.recipes.get(segments[-1])
            if recipe is None:
                return httpx.Response(
                    400, json={"status": "fail", "message": f"Invalid _id: {segments[-1]}. Please try again!"}
                )
            return httpx.Response(200, json={"status": "success", "data": {"recipe": recipe}})

        query = request.url.params.get("search", "").lower()
        hits = [
            {k: r[k] for k in ("id", "title", "publisher", "image_url") if k in r}
            for r in self.recipes.values()
            if query in r["title"].lower()
        ]
        return httpx.Response(200, json={"status": "success", "results": len(hits), "data": {"recipes": hits}})


@pytest.fixture
def api() -> FakeForkifyApi:
    """A fake API with a soup, a stew and 25 pizzas."""
    fake = FakeForkifyApi()
    fake.add_recipe(
        "soup",
        "Tomato Soup",
        servings=4,
        ingredients=[
            {"quantity": 1, "unit": "kg", "description": "tomatoes"},
            {"quantity": 0.5, "unit": "cup", "description": "cream"},
            {"quantity": None, "unit": "", "description": "salt"},
        ],
    )
    fake.add_recipe(
        "stew",
        "Beef Stew",
        servings=2,
        ingredients=[{"quantity": 500, "unit": "g", "description": "beef"}],
    )
    for n in range(25):
        fake.add_recipe(f"pizza-{n}", f"Pizza {n}")
    return fake


@pytest.fixture
async def client(api: FakeForkifyApi):
    """ForkifyClient wired to the fake API."""
    forkify_client = ForkifyClient(
        api_url=API_URL,
        api_key="test-key",
        timeout=2,
        transport=httpx.MockTransport(api.handler),
    )
    yield forkify_client
    await forkify_client.aclose()


@pytest.fixture
def store() -> MemoryBookmarkStore:
    return MemoryBookmarkStore()


@pytest.fixture
def model(client: ForkifyClient, store: MemoryBookmarkStore) -> RecipeModel:
    return RecipeModel(client, store, results_per_page=10)


@pytest.fixture
async def forkify_app(model: RecipeModel):
    """A started ForkifyApp with a short modal close delay."""
    forkify = ForkifyApp(model, modal_close_sec=0.01)
    await forkify.start()
    yield forkify
    if forkify._close_handle is not None:
        forkify._close_handle.cancel()


@pytest.fixture
def upload_fields() -> dict[str, str]:
    """A valid upload form submission."""
    return {
        "title": "Grandma's Pie",
        "sourceUrl": "https://grandma.test/pie",
        "image": "https://grandma.test/pie.jpg",
        "publisher": "Grandma",
        "cookingTime": "90",
        "servings": "6",
        "ingredient-1": "0.5,kg,Apples",
        "ingredient-2": "1,,Pie crust",
        "ingredient-3": "",
        "ingredient-4": ",,Cinnamon",
        "ingredient-5": "",
        "ingredient-6": "",
    }
