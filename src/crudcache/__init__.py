"""crudcache - Redis-backed cache adapter for CRUD frameworks.

Exposes a remote key-value store through a small async get/set/delete
interface, taking care of key prefixing, value serialization and
connection pooling.

Example:
    from datetime import timedelta

    from crudcache import CacheConfig, NotFoundError, RedisConfig, create_redis_cache

    cache = create_redis_cache(
        RedisConfig(address="localhost:6379", db=1),
        CacheConfig(key_prefix="app:"),
    )

    await cache.set("user:1", {"name": "jack", "age": 18}, ttl=timedelta(seconds=5))
    user = await cache.get("user:1")

    try:
        await cache.get("user:2")
    except NotFoundError:
        ...

    await cache.delete("user:1")
    await cache.close()

Testing without a Redis server:
    from crudcache import InMemoryCacheBackend, RemoteCache

    cache = RemoteCache(InMemoryCacheBackend())
"""

from crudcache.core.entities import CacheConfig, CacheEntry, RedisConfig
from crudcache.core.interfaces import ICache, ICacheBackend, ISerializer
from crudcache.core.services import RemoteCache
from crudcache.exceptions import (
    CacheError,
    CodecError,
    ConfigurationError,
    DeserializationError,
    NotFoundError,
    SerializationError,
    TransportError,
)
from crudcache.factory import create_redis_cache
from crudcache.infrastructure import (
    FunctionSerializer,
    InMemoryCacheBackend,
    JsonSerializer,
    PickleSerializer,
    RedisCacheBackend,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "CacheConfig",
    "CacheEntry",
    "RedisConfig",
    # Core interfaces
    "ICache",
    "ICacheBackend",
    "ISerializer",
    # Core services
    "RemoteCache",
    "create_redis_cache",
    # Errors
    "CacheError",
    "CodecError",
    "ConfigurationError",
    "DeserializationError",
    "NotFoundError",
    "SerializationError",
    "TransportError",
    # Infrastructure implementations
    "InMemoryCacheBackend",
    "RedisCacheBackend",
    "FunctionSerializer",
    "JsonSerializer",
    "PickleSerializer",
]
