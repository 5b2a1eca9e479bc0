"""Domain entities for crudcache."""

from crudcache.core.entities.cache_config import CacheConfig
from crudcache.core.entities.cache_entry import CacheEntry, normalize_ttl
from crudcache.core.entities.redis_config import RedisConfig

__all__ = [
    "CacheConfig",
    "CacheEntry",
    "RedisConfig",
    "normalize_ttl",
]
