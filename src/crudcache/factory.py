"""Factory for Redis-backed caches."""

from crudcache.core.entities.cache_config import CacheConfig
from crudcache.core.entities.redis_config import RedisConfig
from crudcache.core.services.remote_cache import RemoteCache
from crudcache.infrastructure.backends.redis import RedisCacheBackend


def create_redis_cache(
    redis_config: RedisConfig | None = None,
    cache_config: CacheConfig | None = None,
) -> RemoteCache:
    """Create a RemoteCache backed by Redis.

    No connection is opened here; the pool dials on first use. Call
    ``await cache.ping()`` to check connectivity up front.

    Args:
        redis_config: Connection and pool settings. Defaults to
            ``localhost:6379``, db 0, a pool of 20 connections.
        cache_config: Key prefix and serializer. Defaults to no prefix
            and JSON.

    Returns:
        A ready-to-use RemoteCache.
    """
    return RemoteCache(
        backend=RedisCacheBackend(redis_config),
        config=cache_config,
    )
