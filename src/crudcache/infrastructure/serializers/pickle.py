"""Pickle serializer implementation."""

import pickle
from typing import Any

from crudcache.exceptions import DeserializationError, SerializationError


class PickleSerializer:
    """Pickle serializer for cache values.

    Preserves arbitrary Python types, at the cost of only being readable
    by Python. Only use it with a store that untrusted parties cannot
    write to.
    """

    def __init__(self, protocol: int = pickle.HIGHEST_PROTOCOL) -> None:
        """Initialize the pickle serializer.

        Args:
            protocol: Pickle protocol version used when serializing.
        """
        self._protocol = protocol

    def serialize(self, value: Any) -> bytes:
        """Serialize value to bytes.

        Args:
            value: The Python object to serialize.

        Returns:
            The pickled value as bytes.

        Raises:
            SerializationError: If the value cannot be pickled.
        """
        try:
            return pickle.dumps(value, protocol=self._protocol)
        except Exception as e:
            raise SerializationError(f"Failed to serialize value: {e}") from e

    def deserialize(self, data: bytes) -> Any:
        """Deserialize bytes to value.

        Unpickling can fail in many ways, including imports of modules or
        attributes that no longer exist, so every failure is reported as a
        DeserializationError.

        Args:
            data: The bytes to deserialize.

        Returns:
            The unpickled Python object.

        Raises:
            DeserializationError: If the data cannot be unpickled.
        """
        try:
            return pickle.loads(data)
        except Exception as e:
            raise DeserializationError(f"Failed to deserialize data: {e}") from e
