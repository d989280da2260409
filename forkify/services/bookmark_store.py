"""
Bookmark persistence.

Bookmarks are plain recipe entities; the store keeps the whole list and
rewrites it on every change.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class BookmarkStore:
    """
    Abstract storage interface.
    Implement with a file for the app, or in-memory for tests.
    """

    def load(self) -> list[dict[str, Any]]:
        """Return the saved bookmarks, or [] if none were saved."""
        raise NotImplementedError

    def save(self, bookmarks: list[dict[str, Any]]) -> None:
        """Replace the saved bookmarks."""
        raise NotImplementedError


class MemoryBookmarkStore(BookmarkStore):
    """In-memory storage for testing."""

    def __init__(self, bookmarks: list[dict[str, Any]] | None = None) -> None:
        self.saved: str | None = json.dumps(bookmarks) if bookmarks is not None else None
        self.save_count = 0

    def load(self) -> list[dict[str, Any]]:
        return json.loads(self.saved) if self.saved else []

    def save(self, bookmarks: list[dict[str, Any]]) -> None:
        self.saved = json.dumps(bookmarks)
        self.save_count += 1


class FileBookmarkStore(BookmarkStore):
    """Bookmarks as a JSON file on disk."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> list[dict[str, Any]]:
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("bookmark_store: ignoring unreadable %s: %s", self.path, e)
            return []
        if not isinstance(data, list):
            logger.warning("bookmark_store: ignoring %s, expected a list", self.path)
            return []
        return data

    def save(self, bookmarks: list[dict[str, Any]]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(json.dumps(bookmarks, ensure_ascii=False), encoding="utf-8")
        tmp.replace(self.path)
