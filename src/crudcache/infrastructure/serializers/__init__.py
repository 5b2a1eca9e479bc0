"""Serializer implementations."""

from crudcache.infrastructure.serializers.function import FunctionSerializer
from crudcache.infrastructure.serializers.json import JsonSerializer
from crudcache.infrastructure.serializers.pickle import PickleSerializer

__all__ = [
    "FunctionSerializer",
    "JsonSerializer",
    "PickleSerializer",
]
