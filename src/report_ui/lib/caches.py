"""
Disk-backed response cache with a staleness window.

Report payloads are cached on disk keyed by request so that repeated page
loads with the same filters inside the staleness window reuse the previous
response instead of issuing a new GET. Uses the diskcache library, which is
thread-safe and process-safe.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, TypeVar

import diskcache

T = TypeVar("T")


@dataclass
class CacheEntry:
    """
    Wrapper around a cached value.

    Attributes:
        value: The cached value.
        hit: True when the value came from the cache rather than the loader.
    """

    value: Any
    hit: bool = False


class ResponseCache:
    """
    Disk cache for report responses.

    Attributes:
        cache_dir: Path to the cache directory.
        stale_seconds: Default time-to-live of an entry. None or 0 disables
            expiry.
    """

    def __init__(self, cache_dir: str | Path, stale_seconds: int | None = None) -> None:
        """
        Initialize the cache.

        Args:
            cache_dir: Directory for cache files, created if missing.
            stale_seconds: Default TTL applied by get_or_load and set.
        """
        self.cache_dir = Path(cache_dir)
        self.stale_seconds = stale_seconds or None
        self._cache = diskcache.Cache(str(self.cache_dir))

    def get_or_load(
        self,
        key: str,
        loader: Callable[[], T],
        expire: int | None = None,
    ) -> CacheEntry:
        """
        Return the cached value for key, or call loader and store its result.

        Loader exceptions propagate and nothing is stored, so a failed
        request is retried on the next call.

        Args:
            key: Cache key string.
            loader: Zero-argument function invoked on a miss.
            expire: TTL in seconds, defaults to stale_seconds.

        Returns:
            CacheEntry with the value and whether it was a hit.
        """
        cached = self._cache.get(key, default=None)
        if cached is not None:
            return CacheEntry(value=cached, hit=True)

        value = loader()
        self.set(key, value, expire=expire)
        return CacheEntry(value=value)

    def get(self, key: str) -> CacheEntry | None:
        cached = self._cache.get(key, default=None)
        if cached is not None:
            return CacheEntry(value=cached, hit=True)
        return None

    def set(self, key: str, value: Any, expire: int | None = None) -> None:
        self._cache.set(key, value, expire=expire or self.stale_seconds)

    def delete(self, key: str) -> None:
        self._cache.delete(key)

    def clear(self) -> None:
        """Drop every cached response."""
        self._cache.clear()

    def close(self) -> None:
        self._cache.close()
