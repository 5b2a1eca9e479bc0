"""Cache backend implementations."""

from crudcache.infrastructure.backends.memory import InMemoryCacheBackend
from crudcache.infrastructure.backends.redis import RedisCacheBackend, build_connection_pool

__all__ = [
    "InMemoryCacheBackend",
    "RedisCacheBackend",
    "build_connection_pool",
]
