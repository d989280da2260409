"""
Forkify configuration — all environment variables in one place.

Read from environment at runtime.
"""

from __future__ import annotations

import os


def _number(name: str, default: str, cast=float):
    raw = os.environ.get(name, default)
    try:
        value = cast(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise RuntimeError(f"{name} must be positive, got {raw!r}")
    return value


class Settings:
    """Application settings from environment variables."""

    # Recipe API
    FORKIFY_API_URL: str = os.environ.get("FORKIFY_API_URL", "https://forkify-api.herokuapp.com/api/v2/recipes")
    FORKIFY_API_KEY: str = os.environ.get("FORKIFY_API_KEY", "")
    TIMEOUT_SEC: float = _number("TIMEOUT_SEC", "10")

    # Views
    RES_PER_PAGE: int = _number("RES_PER_PAGE", "10", int)
    MODAL_CLOSE_SEC: float = _number("MODAL_CLOSE_SEC", "2.5")
    ICONS_URL: str = os.environ.get("ICONS_URL", "/static/icons.svg")

    # Bookmarks (empty path keeps them in memory)
    BOOKMARKS_PATH: str = os.environ.get("BOOKMARKS_PATH", "")

    # Application
    ENVIRONMENT: str = os.environ.get("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()


# Singleton instance
settings = Settings()
