"""
View Kernel — Event Registration

Publish/subscribe between whatever observes external triggers (a route, a
button, a timer) and the handlers that react by rendering views. Neither side
knows about the other; they only share an event name.

Handlers take zero or one argument. Handlers run in registration order and
their exceptions propagate to the publisher.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

Handler = Callable[..., Any]


class EventBus:
    """Named events → ordered handler lists."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = {}

    def subscribe(self, event: str, handler: Handler) -> Callable[[], None]:
        """Register handler for event. Returns a callable that unsubscribes it."""
        self._handlers.setdefault(event, []).append(handler)

        def unsubscribe() -> None:
            handlers = self._handlers.get(event, [])
            if handler in handlers:
                handlers.remove(handler)

        return unsubscribe

    def handlers(self, event: str) -> list[Handler]:
        return list(self._handlers.get(event, []))

    def publish(self, event: str, *args: Any) -> list[Any]:
        """Invoke handlers synchronously. Coroutine handlers are not awaited here; use emit()."""
        results = []
        for handler in self.handlers(event):
            results.append(handler(*args))
        if not results:
            logger.debug("events: no handlers for %s", event)
        return results

    async def emit(self, event: str, *args: Any) -> list[Any]:
        """Invoke handlers in order, awaiting any that return an awaitable."""
        results = []
        for handler in self.handlers(event):
            result = handler(*args)
            if inspect.isawaitable(result):
                result = await result
            results.append(result)
        if not results:
            logger.debug("events: no handlers for %s", event)
        return results
