"""Serializer built from a marshal/unmarshal function pair."""

from collections.abc import Callable
from typing import Any

from crudcache.exceptions import DeserializationError, SerializationError

MarshalFunc = Callable[[Any], bytes]
UnmarshalFunc = Callable[[bytes], Any]


class FunctionSerializer:
    """Adapts a plain pair of functions to the serializer interface.

    Example:
        import msgpack

        serializer = FunctionSerializer(msgpack.packb, msgpack.unpackb)
    """

    def __init__(self, marshal: MarshalFunc, unmarshal: UnmarshalFunc) -> None:
        """Initialize the serializer.

        Args:
            marshal: Converts a value to bytes.
            unmarshal: Converts bytes back to a value.
        """
        self._marshal = marshal
        self._unmarshal = unmarshal

    def serialize(self, value: Any) -> bytes:
        """Serialize value with the marshal function.

        Raises:
            SerializationError: If marshal raises or does not return bytes.
        """
        try:
            data = self._marshal(value)
        except Exception as e:
            raise SerializationError(f"Failed to serialize value: {e}") from e
        if isinstance(data, str):
            return data.encode("utf-8")
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise SerializationError(
                f"marshal returned {type(data).__name__}, expected bytes"
            )
        return bytes(data)

    def deserialize(self, data: bytes) -> Any:
        """Deserialize data with the unmarshal function.

        Raises:
            DeserializationError: If unmarshal raises.
        """
        try:
            return self._unmarshal(data)
        except Exception as e:
            raise DeserializationError(f"Failed to deserialize data: {e}") from e
