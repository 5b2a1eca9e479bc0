"""Infrastructure layer implementations for crudcache."""

from crudcache.infrastructure.backends import InMemoryCacheBackend, RedisCacheBackend
from crudcache.infrastructure.serializers import (
    FunctionSerializer,
    JsonSerializer,
    PickleSerializer,
)

__all__ = [
    "InMemoryCacheBackend",
    "RedisCacheBackend",
    "FunctionSerializer",
    "JsonSerializer",
    "PickleSerializer",
]
