"""Core domain layer for crudcache."""

from crudcache.core.entities import CacheConfig, CacheEntry, RedisConfig
from crudcache.core.interfaces import ICache, ICacheBackend, ISerializer
from crudcache.core.services import RemoteCache

__all__ = [
    # Entities
    "CacheConfig",
    "CacheEntry",
    "RedisConfig",
    # Interfaces
    "ICache",
    "ICacheBackend",
    "ISerializer",
    # Services
    "RemoteCache",
]
