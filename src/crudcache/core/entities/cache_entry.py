"""Cache entry entity."""

import math
from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True)
class CacheEntry:
    """Immutable cache entry value object.

    Represents a serialized value ready to be handed to a backend under
    its effective (prefixed) key.
    """

    key: str
    data: bytes
    ttl: timedelta | None = None

    @property
    def ttl_milliseconds(self) -> int | None:
        """TTL in whole milliseconds, rounded up so it never reaches zero.

        Returns:
            The expiry in milliseconds, or None if the entry never expires.
        """
        if self.ttl is None:
            return None
        return max(1, math.ceil(self.ttl.total_seconds() * 1000))

    @classmethod
    def create(
        cls,
        prefix: str,
        key: str,
        data: bytes,
        ttl: timedelta | float | None = None,
    ) -> "CacheEntry":
        """Factory method to create a new cache entry.

        Args:
            prefix: The configured key prefix.
            key: The caller's logical key.
            data: The serialized value.
            ttl: Optional time-to-live, as a timedelta or in seconds.
                Zero or negative means no expiration.

        Returns:
            A new CacheEntry instance.
        """
        return cls(
            key=prefix + key,
            data=data,
            ttl=normalize_ttl(ttl),
        )


def normalize_ttl(ttl: timedelta | float | None) -> timedelta | None:
    """Convert a ttl given as timedelta or seconds to a positive timedelta.

    Args:
        ttl: The requested time-to-live.

    Returns:
        The ttl as a timedelta, or None when no expiration applies.
    """
    if ttl is None:
        return None
    if not isinstance(ttl, timedelta):
        ttl = timedelta(seconds=ttl)
    if ttl <= timedelta(0):
        return None
    return ttl
