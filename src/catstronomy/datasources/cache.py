"""Request-scoped memo for outgoing fetches."""

import asyncio
from collections.abc import Awaitable, Callable
from functools import partial
from typing import Any

from ..logging import get_logger

logger = get_logger(__name__)

CacheKey = tuple[str, str]  # (method, fully resolved URL)


class RequestCache:
    """Memoizes fetch results for the lifetime of one request context.

    Concurrent callers asking for the same key share a single in-flight
    fetch. Only completed fetches stay cached: a fetch that fails or is
    cancelled leaves no entry behind.
    """

    def __init__(self) -> None:
        self._entries: dict[CacheKey, asyncio.Future[Any]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    async def get_or_fetch(self, key: CacheKey, fetch: Callable[[], Awaitable[Any]]) -> Any:
        """Return the cached result for ``key``, running ``fetch`` on a miss."""
        future = self._entries.get(key)
        if future is None:
            future = asyncio.ensure_future(fetch())
            self._entries[key] = future
            future.add_done_callback(partial(self._discard_unsuccessful, key))
        else:
            logger.debug("Request cache hit", method=key[0], url=key[1])

        # Shielded so one waiter being cancelled does not abort a fetch others share
        return await asyncio.shield(future)

    def _discard_unsuccessful(self, key: CacheKey, future: asyncio.Future[Any]) -> None:
        if future.cancelled() or future.exception() is not None:
            if self._entries.get(key) is future:
                del self._entries[key]

    def clear(self) -> None:
        """Cancel in-flight fetches and drop every entry."""
        for future in self._entries.values():
            if not future.done():
                future.cancel()
        self._entries.clear()
