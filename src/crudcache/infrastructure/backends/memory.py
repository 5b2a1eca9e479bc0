"""In-memory cache backend implementation."""

import math
import time
from collections.abc import Callable
from datetime import timedelta
from typing import Any

from cachetools import TLRUCache  # type: ignore[import-untyped]


def _time_to_use(_key: str, value: tuple[bytes, float | None], now: float) -> float:
    """Expiry time of an entry; entries without a ttl never expire."""
    ttl = value[1]
    if ttl is None:
        return math.inf
    return now + ttl


class InMemoryCacheBackend:
    """In-memory cache backend using LRU with per-entry TTL.

    Suitable for tests and single-process deployments. Uses cachetools'
    TLRUCache so each entry carries its own expiry; the least recently
    used entry is evicted when the cache is full.
    """

    def __init__(
        self,
        maxsize: int = 1024,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the in-memory cache backend.

        Args:
            maxsize: Maximum number of items in the cache.
            timer: Clock returning seconds, used to expire entries.
        """
        self._maxsize = maxsize
        self._cache: Any = TLRUCache(
            maxsize=maxsize,
            ttu=_time_to_use,
            timer=timer,
        )

    async def get(self, key: str) -> bytes | None:
        """Retrieve stored bytes by key.

        Args:
            key: The cache key to retrieve.

        Returns:
            The stored bytes, or None if not found or expired.
        """
        entry = self._cache.get(key)
        if entry is None:
            return None
        return entry[0]

    async def set(
        self,
        key: str,
        data: bytes,
        ttl: timedelta | None = None,
    ) -> None:
        """Store bytes with optional TTL.

        Args:
            key: The cache key.
            data: The bytes to store.
            ttl: Optional time-to-live. If None, the entry never expires.
        """
        seconds = ttl.total_seconds() if ttl is not None else None
        self._cache[key] = (data, seconds)

    async def delete(self, key: str) -> bool:
        """Delete stored bytes.

        Args:
            key: The cache key to delete.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        try:
            del self._cache[key]
            return True
        except KeyError:
            return False

    async def ping(self) -> bool:
        """Always live."""
        return True

    async def close(self) -> None:
        """Drop all entries."""
        self._cache.clear()

    def __len__(self) -> int:
        """Return the number of items in the cache."""
        return len(self._cache)

    @property
    def maxsize(self) -> int:
        """Return the maximum size of the cache."""
        return self._maxsize
