"""Cache configuration entity."""

from dataclasses import dataclass

from crudcache.core.interfaces.serializer import ISerializer


@dataclass(frozen=True)
class CacheConfig:
    """RemoteCache configuration.

    The prefix is prepended to every logical key to form the key used in
    the store. When no serializer is given the cache encodes values as
    JSON.
    """

    key_prefix: str = ""
    serializer: ISerializer | None = None
