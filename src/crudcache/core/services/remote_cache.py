"""RemoteCache - adapts a key-value backend to the CRUD cache interface."""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Mapping
from datetime import timedelta
from typing import Any, TypeVar

from crudcache.core.entities.cache_config import CacheConfig
from crudcache.core.entities.cache_entry import CacheEntry
from crudcache.core.interfaces.cache_backend import ICacheBackend
from crudcache.core.interfaces.serializer import ISerializer
from crudcache.exceptions import DeserializationError, NotFoundError, TransportError
from crudcache.infrastructure.serializers.json import JsonSerializer

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RemoteCache:
    """Get/set/delete over a remote key-value store.

    Prefixes every key, runs values through the configured serializer and
    delegates storage to the backend. Holds no per-call state, so a single
    instance can be shared by concurrent tasks. Each call is attempted
    exactly once; retry policy belongs to the caller.
    """

    def __init__(
        self,
        backend: ICacheBackend,
        config: CacheConfig | None = None,
    ) -> None:
        """Initialize the cache.

        Args:
            backend: The connection provider used for storage.
            config: Optional cache configuration. Uses defaults if not provided.
        """
        self._backend = backend
        self._config = config or CacheConfig()
        self._serializer: ISerializer = self._config.serializer or JsonSerializer()

    @property
    def config(self) -> CacheConfig:
        """Get the cache configuration."""
        return self._config

    @property
    def backend(self) -> ICacheBackend:
        """Get the backend."""
        return self._backend

    @property
    def key_prefix(self) -> str:
        """Get the prefix prepended to every key."""
        return self._config.key_prefix

    def effective_key(self, key: str) -> str:
        """Return the key used in the store for a logical key."""
        return self._config.key_prefix + key

    async def get(
        self,
        key: str,
        factory: Callable[..., T] | None = None,
        timeout: float | None = None,
    ) -> Any:
        """Return the value cached under key.

        Args:
            key: The logical cache key.
            factory: Optional callable that builds the result from the
                decoded payload, e.g. a dataclass. Mapping payloads are
                passed as keyword arguments, anything else positionally.
            timeout: Optional deadline in seconds for the backend call.

        Returns:
            The decoded value, or the object built by factory.

        Raises:
            NotFoundError: If the key is absent or expired.
            DeserializationError: If the stored bytes cannot be decoded, or
                the decoded payload does not fit factory.
            TransportError: If the backend fails or the deadline passes.
        """
        cache_key = self.effective_key(key)
        data = await self._call(self._backend.get(cache_key), timeout, "get", cache_key)

        if data is None:
            logger.debug("Cache miss for %s", cache_key)
            raise NotFoundError(key)

        logger.debug("Cache hit for %s", cache_key)
        value = self._serializer.deserialize(data)

        if factory is None:
            return value
        try:
            if isinstance(value, Mapping):
                return factory(**value)
            return factory(value)
        except (TypeError, ValueError) as e:
            raise DeserializationError(
                f"Cached value for {key!r} does not fit {factory!r}: {e}"
            ) from e

    async def set(
        self,
        key: str,
        value: Any,
        ttl: timedelta | float | None = None,
        timeout: float | None = None,
    ) -> None:
        """Cache a value.

        Args:
            key: The logical cache key.
            value: The value to cache.
            ttl: Optional time-to-live, as a timedelta or in seconds.
                None, zero or negative stores the value without expiration.
            timeout: Optional deadline in seconds for the backend call.

        Raises:
            SerializationError: If the value cannot be encoded.
            TransportError: If the backend fails or the deadline passes.
        """
        entry = CacheEntry.create(
            prefix=self._config.key_prefix,
            key=key,
            data=self._serializer.serialize(value),
            ttl=ttl,
        )

        await self._call(
            self._backend.set(entry.key, entry.data, entry.ttl),
            timeout,
            "set",
            entry.key,
        )
        logger.debug("Cached %s (ttl=%s)", entry.key, entry.ttl)

    async def delete(self, key: str, timeout: float | None = None) -> None:
        """Remove a cached value. Removing an absent key is not an error.

        Args:
            key: The logical cache key.
            timeout: Optional deadline in seconds for the backend call.

        Raises:
            TransportError: If the backend fails or the deadline passes.
        """
        cache_key = self.effective_key(key)
        existed = await self._call(
            self._backend.delete(cache_key), timeout, "delete", cache_key
        )
        logger.debug("Deleted %s (existed=%s)", cache_key, existed)

    async def ping(self, timeout: float | None = None) -> bool:
        """Check that the backend is reachable.

        Raises:
            TransportError: If the backend fails or the deadline passes.
        """
        return await self._call(self._backend.ping(), timeout, "ping", None)

    async def close(self) -> None:
        """Release backend resources."""
        await self._backend.close()

    async def __aenter__(self) -> "RemoteCache":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Async context manager exit."""
        await self.close()

    async def _call(
        self,
        operation: Awaitable[T],
        timeout: float | None,
        name: str,
        cache_key: str | None,
    ) -> T:
        """Await a backend operation, enforcing the optional deadline."""
        if timeout is None:
            return await operation
        try:
            return await asyncio.wait_for(operation, timeout)
        except asyncio.TimeoutError as e:
            logger.warning("Cache %s timed out after %ss for %s", name, timeout, cache_key)
            raise TransportError(f"{name} timed out after {timeout}s") from e
