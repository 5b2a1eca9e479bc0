"""Framework-facing cache interface."""

from collections.abc import Callable
from datetime import timedelta
from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class ICache(Protocol):
    """Contract a CRUD framework uses to plug in a cache.

    Values go in and come out as Python objects; how they are encoded
    and where they are stored is up to the implementation.
    """

    async def get(
        self,
        key: str,
        factory: Callable[..., T] | None = None,
        timeout: float | None = None,
    ) -> Any:
        """Return the value cached under key.

        Raises:
            NotFoundError: If the key is absent or expired.
        """
        ...

    async def set(
        self,
        key: str,
        value: Any,
        ttl: timedelta | float | None = None,
        timeout: float | None = None,
    ) -> None:
        """Cache value under key, expiring after ttl when ttl is positive."""
        ...

    async def delete(self, key: str, timeout: float | None = None) -> None:
        """Remove key. Removing an absent key is not an error."""
        ...
