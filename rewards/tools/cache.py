"""Read-through TTL cache for the transaction fetch"""

import time
from functools import wraps
from typing import Any, Callable, Dict, Optional, Tuple

from rewards.constants import CACHE_KEY, DEFAULT_CACHE_TTL_SECONDS
from rewards.utils.errors import CacheError
from rewards.utils.logging import get_logger
from rewards.utils.metrics import cache_lookups, cache_invalidations

logger = get_logger(__name__)


class TTLCache:
    """
    In-memory cache whose entries expire ``ttl_seconds`` after they were stored.

    Args:
        ttl_seconds: Entry lifetime
        clock: Callable returning the current time in seconds (time.time by default)
    """

    def __init__(self, ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS, clock: Callable[[], float] = time.time):
        if ttl_seconds <= 0:
            raise CacheError(f"Cache TTL must be positive, got {ttl_seconds}")
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, Tuple[Any, float]] = {}

    def get(self, key: str) -> Optional[Any]:
        """Cached value, or None when missing or expired"""
        entry = self._entries.get(key)
        if entry is None:
            return None

        value, stored_at = entry
        if self._clock() - stored_at >= self.ttl_seconds:
            del self._entries[key]
            logger.debug("Cache entry expired", key=key)
            return None
        return value

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = (value, self._clock())

    def stored_at(self, key: str) -> Optional[float]:
        entry = self._entries.get(key)
        return entry[1] if entry else None

    def invalidate(self, key: Optional[str] = None) -> None:
        """Drop one entry, or everything when ``key`` is None"""
        if key is None:
            self._entries.clear()
        else:
            self._entries.pop(key, None)
        cache_invalidations.inc()
        logger.debug("Cache invalidated", key=key or "*")


def cached_fetch(cache: TTLCache, key: str = CACHE_KEY):
    """
    Decorate a fetch function so results are read through ``cache``.

    Empty results are never served from the cache. The wrapped function
    accepts ``force_refresh=True`` to bypass the cached entry.
    """
    def decorator(fetch: Callable):
        @wraps(fetch)
        def wrapper(*args, force_refresh: bool = False, **kwargs):
            if not force_refresh:
                cached = cache.get(key)
                if cached:
                    cache_lookups.labels(result='hit').inc()
                    logger.info("Serving transactions from cache", key=key, count=len(cached))
                    return list(cached)

            cache_lookups.labels(result='miss').inc()
            data = fetch(*args, **kwargs)
            cache.set(key, tuple(data))
            return data

        wrapper.cache = cache
        wrapper.cache_key = key
        return wrapper

    return decorator
