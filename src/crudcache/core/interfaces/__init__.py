"""Core interfaces (Protocol classes) for crudcache."""

from crudcache.core.interfaces.cache import ICache
from crudcache.core.interfaces.cache_backend import ICacheBackend
from crudcache.core.interfaces.serializer import ISerializer

__all__ = [
    "ICache",
    "ICacheBackend",
    "ISerializer",
]
