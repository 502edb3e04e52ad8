import logging
import time
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple

logger = logging.getLogger(__name__)


class ResultCache:
    """
    Memoizes the results of async computations by key.

    The owner decides the scope: build one per request, one per build, or
    share one with a ttl. Entries older than ``ttl_seconds`` are recomputed;
    ``None`` means they never expire while the cache lives.
    """

    def __init__(
        self,
        ttl_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self.clock = clock
        self._entries: Dict[str, Tuple[float, Any]] = {}

    async def get_or_set(self, key: str, factory: Callable[[], Awaitable[Any]]):
        now = self.clock()
        entry = self._entries.get(key)
        if entry is not None:
            stored_at, value = entry
            if self.ttl_seconds is None or now - stored_at < self.ttl_seconds:
                return value
            logger.debug(f"Cache entry {key} expired")

        value = await factory()
        self._entries[key] = (self.clock(), value)
        return value

    def invalidate(self, key: Optional[str] = None) -> None:
        if key is None:
            self._entries.clear()
        else:
            self._entries.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._entries
