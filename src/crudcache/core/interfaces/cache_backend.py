"""Cache backend interface."""

from datetime import timedelta
from typing import Protocol


class ICacheBackend(Protocol):
    """Contract for the connection provider behind a RemoteCache.

    Backends deal only in raw bytes under fully prefixed keys. They own
    connecting, authentication, db selection and connection health
    checks. Methods are async to support both in-memory and networked
    implementations.
    """

    async def get(self, key: str) -> bytes | None:
        """Retrieve stored bytes by key.

        Args:
            key: The effective cache key.

        Returns:
            The stored bytes, or None if not found or expired.

        Raises:
            TransportError: If the store cannot be reached.
        """
        ...

    async def set(
        self,
        key: str,
        data: bytes,
        ttl: timedelta | None = None,
    ) -> None:
        """Store bytes with optional TTL.

        Args:
            key: The effective cache key.
            data: The bytes to store.
            ttl: Optional time-to-live. None stores without expiration.

        Raises:
            TransportError: If the store cannot be reached.
        """
        ...

    async def delete(self, key: str) -> bool:
        """Delete stored bytes.

        Args:
            key: The effective cache key.

        Returns:
            True if the key existed and was deleted, False otherwise.

        Raises:
            TransportError: If the store cannot be reached.
        """
        ...

    async def ping(self) -> bool:
        """Probe the store for liveness.

        Raises:
            TransportError: If the store cannot be reached.
        """
        ...

    async def close(self) -> None:
        """Release any resources owned by the backend."""
        ...
