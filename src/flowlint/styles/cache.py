"""Single-flight cache for the site-wide style catalogue."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

from flowlint.events.bus import EventBus
from flowlint.events.types import StyleCacheInvalidated
from flowlint.model.style import StyleInfo

logger = logging.getLogger("flowlint.styles")

StyleFetch = Callable[[], Awaitable[list[StyleInfo]]]


class StyleCache:
    """Owns one in-flight or resolved fetch of all site styles.

    Callers arriving before the fetch resolves get the same pending task.
    A failed fetch is dropped so the next caller retries. The owner calls
    ``reset`` when the active preset or opinion mode changes.
    """

    def __init__(self, bus: EventBus | None = None) -> None:
        self._task: asyncio.Task[list[StyleInfo]] | None = None
        self._bus = bus

    def get(self) -> asyncio.Task[list[StyleInfo]] | None:
        return self._task

    def set(self, task: asyncio.Task[list[StyleInfo]] | None) -> None:
        self._task = task

    def reset(self, reason: str = "manual") -> None:
        had_value = self._task is not None
        self._task = None
        logger.info("Style cache reset (%s)", reason)
        if self._bus is not None:
            self._bus.emit(StyleCacheInvalidated(reason=reason, had_value=had_value))

    def get_or_fetch(self, fetch: StyleFetch) -> asyncio.Task[list[StyleInfo]]:
        """Return the shared task, starting ``fetch`` if nothing is cached.

        Must be called from a running event loop.
        """
        if self._task is None:
            logger.debug("Style cache miss, fetching site styles")
            task = asyncio.ensure_future(fetch())
            task.add_done_callback(self._drop_if_failed)
            self._task = task
        return self._task

    def _drop_if_failed(self, task: asyncio.Task[list[StyleInfo]]) -> None:
        if task.cancelled() or task.exception() is not None:
            if self._task is task:
                self._task = None
            if not task.cancelled():
                logger.warning("Style fetch failed: %s", task.exception())
