"""Domain services for crudcache."""

from crudcache.core.services.remote_cache import RemoteCache

__all__ = [
    "RemoteCache",
]
