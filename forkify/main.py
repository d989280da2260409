"""
Forkify FastAPI application.

Entry point for the web server. One ForkifyApp (document, views, model) lives
for the lifetime of the process.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from forkify.config import settings
from forkify.routes import pages as pages_routes
from forkify.services.bookmark_store import FileBookmarkStore, MemoryBookmarkStore
from forkify.services.controller import ForkifyApp
from forkify.services.forkify_client import ForkifyClient
from forkify.services.recipe_model import RecipeModel

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def build_forkify() -> ForkifyApp:
    """Wire the application from settings."""
    store = FileBookmarkStore(settings.BOOKMARKS_PATH) if settings.BOOKMARKS_PATH else MemoryBookmarkStore()
    return ForkifyApp(RecipeModel(ForkifyClient(), store))


def create_app(forkify: ForkifyApp | None = None) -> FastAPI:
    """
    Build the FastAPI app.

    A prebuilt (and already started) ForkifyApp can be passed in; otherwise
    one is built from settings and started on application startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        if getattr(app.state, "forkify", None) is None:
            app.state.forkify = build_forkify()
            await app.state.forkify.start()
            logger.info("Forkify started (%s)", settings.ENVIRONMENT)

        yield

        # Shutdown
        await app.state.forkify.shutdown()
        logger.info("Forkify stopped")

    app = FastAPI(
        title="Forkify",
        docs_url=None,
        redoc_url=None,
        lifespan=lifespan,
    )
    if forkify is not None:
        app.state.forkify = forkify

    app.include_router(pages_routes.router)

    @app.get("/health")
    async def health():
        """Health check endpoint for uptime monitoring."""
        return {"status": "ok"}

    return app


app = create_app()
