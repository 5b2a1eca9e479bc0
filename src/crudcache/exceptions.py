"""Exception hierarchy for crudcache."""


class CacheError(Exception):
    """Base class for all crudcache errors."""

    pass


class NotFoundError(CacheError, KeyError):
    """Raised when a key is absent from the store or has expired."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"key not found: {self.key!r}"


class CodecError(CacheError):
    """Raised when a value cannot be converted to or from bytes."""

    pass


class SerializationError(CodecError):
    """Raised when a value cannot be serialized."""

    pass


class DeserializationError(CodecError):
    """Raised when stored bytes cannot be deserialized."""

    pass


class TransportError(CacheError):
    """Raised for any failure of the connection layer.

    Covers dial, authentication, db selection, protocol errors and
    timeouts. The underlying library exception is kept as ``__cause__``.
    """

    pass


class ConfigurationError(CacheError, ValueError):
    """Raised when a configuration value is invalid."""

    pass
