"""Redis cache backend implementation."""

import logging
import math
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import timedelta
from typing import Any, Optional

import redis.asyncio as redis
from redis.asyncio.connection import SSLConnection
from redis.exceptions import RedisError

from crudcache.core.entities.cache_entry import CacheEntry
from crudcache.core.entities.redis_config import RedisConfig
from crudcache.exceptions import TransportError

logger = logging.getLogger(__name__)


class RedisCacheBackend:
    """Redis cache backend for distributed deployments.

    Talks to Redis through a pooled asyncio client. The client is safe to
    share between tasks; commands borrow a connection from the pool and
    return it when done. Nothing is dialled until the first command.
    """

    def __init__(self, config: Optional[RedisConfig] = None) -> None:
        """Initialize the Redis cache backend.

        Args:
            config: Connection settings. Uses defaults if not provided.
        """
        self._config = config or RedisConfig()

        if self._config.client is not None:
            self._redis = self._config.client
            self._owns_client = False
        elif self._config.connection_pool is not None:
            self._redis = redis.Redis(connection_pool=self._config.connection_pool)
            self._owns_client = False
        else:
            self._redis = redis.Redis(connection_pool=build_connection_pool(self._config))
            self._owns_client = True

    @property
    def client(self) -> redis.Redis:
        """The underlying redis client."""
        return self._redis

    async def get(self, key: str) -> Optional[bytes]:
        """Retrieve stored bytes by key.

        Args:
            key: The cache key to retrieve.

        Returns:
            The stored bytes, or None if not found or expired.
        """
        with _translate_errors("GET", key):
            data = await self._redis.get(key)
        # Caller-supplied clients may have decode_responses enabled
        if isinstance(data, str):
            return data.encode("utf-8")
        return data

    async def set(
        self,
        key: str,
        data: bytes,
        ttl: Optional[timedelta] = None,
    ) -> None:
        """Store bytes with optional TTL.

        Args:
            key: The cache key.
            data: The bytes to store.
            ttl: Optional time-to-live. If None, the key never expires.
        """
        expiry_ms = CacheEntry.create(prefix="", key=key, data=data, ttl=ttl).ttl_milliseconds

        with _translate_errors("SET", key):
            if expiry_ms is not None:
                await self._redis.set(key, data, px=expiry_ms)
            else:
                await self._redis.set(key, data)

    async def delete(self, key: str) -> bool:
        """Delete stored bytes.

        Args:
            key: The cache key to delete.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        with _translate_errors("DEL", key):
            result = await self._redis.delete(key)
        return result > 0

    async def ping(self) -> bool:
        """Send PING to the server."""
        with _translate_errors("PING"):
            return bool(await self._redis.ping())

    async def close(self) -> None:
        """Close the Redis connection pool if this backend created it."""
        if not self._owns_client:
            return
        await self._redis.aclose()

    async def __aenter__(self) -> "RedisCacheBackend":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Async context manager exit."""
        await self.close()


def build_connection_pool(config: RedisConfig) -> redis.ConnectionPool:
    """Create the connection pool described by a config.

    Authentication and db selection happen on each new connection, and are
    skipped when no password is set or the db is 0.

    Args:
        config: Connection settings.

    Returns:
        A BlockingConnectionPool when ``config.wait`` is set, otherwise a
        ConnectionPool that fails once ``max_active`` connections are in use.
    """
    host, port = config.host_and_port()

    kwargs: dict[str, Any] = {
        "host": host,
        "port": port,
        "db": config.db,
        "username": config.username,
        "password": config.password,
        "socket_timeout": config.socket_timeout,
        "socket_connect_timeout": config.socket_connect_timeout,
        "health_check_interval": math.ceil(config.idle_timeout.total_seconds()),
        "max_connections": config.max_active,
    }
    if config.tls:
        kwargs["connection_class"] = SSLConnection
        kwargs["ssl_cert_reqs"] = config.ssl_cert_reqs
        kwargs["ssl_ca_certs"] = config.ssl_ca_certs
    kwargs.update(config.connection_options)

    logger.info(
        "Creating Redis connection pool for %s:%s db=%s tls=%s max_active=%s wait=%s",
        host,
        port,
        config.db,
        config.tls,
        config.max_active,
        config.wait,
    )

    if config.wait:
        return redis.BlockingConnectionPool(timeout=config.pool_timeout, **kwargs)
    return redis.ConnectionPool(**kwargs)


@contextmanager
def _translate_errors(command: str, key: Optional[str] = None) -> Iterator[None]:
    """Re-raise redis client failures as TransportError."""
    try:
        yield
    except RedisError as e:
        logger.warning("Redis %s failed for key %r: %s", command, key, e)
        raise TransportError(f"Redis {command} failed: {e}") from e
