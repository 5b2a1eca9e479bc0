"""Tests for serializers."""

from dataclasses import dataclass
from datetime import date, datetime

import pytest

from crudcache.exceptions import DeserializationError, SerializationError
from crudcache.infrastructure.serializers import (
    FunctionSerializer,
    JsonSerializer,
    PickleSerializer,
)


@dataclass
class Point:
    x: int
    y: int


class TestJsonSerializer:
    """Tests for JsonSerializer."""

    @pytest.fixture
    def serializer(self) -> JsonSerializer:
        """Create a serializer for testing."""
        return JsonSerializer()

    def test_serialize_dict(self, serializer: JsonSerializer) -> None:
        """Test serializing a dictionary."""
        data = {"name": "Alice", "age": 30}
        result = serializer.serialize(data)

        assert isinstance(result, bytes)
        assert b"Alice" in result
        assert b"30" in result

    def test_deserialize_dict(self, serializer: JsonSerializer) -> None:
        """Test deserializing to a dictionary."""
        data = b'{"name": "Alice", "age": 30}'
        result = serializer.deserialize(data)

        assert result == {"name": "Alice", "age": 30}

    def test_serialize_nested(self, serializer: JsonSerializer) -> None:
        """Test serializing nested structures."""
        data = {
            "users": [
                {"id": 1, "name": "Alice", "tags": ["admin"]},
                {"id": 2, "name": "Bob", "tags": []},
            ],
            "count": 2,
        }

        assert serializer.deserialize(serializer.serialize(data)) == data

    def test_serialize_dataclass(self, serializer: JsonSerializer) -> None:
        """Test that dataclasses are stored as their fields."""
        result = serializer.deserialize(serializer.serialize(Point(x=1, y=2)))

        assert result == {"x": 1, "y": 2}

    def test_serialize_datetime(self, serializer: JsonSerializer) -> None:
        """Test serializing datetime and date objects as ISO strings."""
        data = {
            "timestamp": datetime(2024, 1, 15, 10, 30, 0),
            "day": date(2024, 1, 15),
        }

        result = serializer.deserialize(serializer.serialize(data))

        assert result == {"timestamp": "2024-01-15T10:30:00", "day": "2024-01-15"}

    def test_serialize_object_dict(self, serializer: JsonSerializer) -> None:
        """Test that plain objects are stored as their __dict__."""

        class Thing:
            def __init__(self) -> None:
                self.name = "thing"

        assert serializer.deserialize(serializer.serialize(Thing())) == {"name": "thing"}

    def test_serialize_none(self, serializer: JsonSerializer) -> None:
        """Test serializing None."""
        assert serializer.deserialize(serializer.serialize(None)) is None

    def test_deserialize_invalid_json(self, serializer: JsonSerializer) -> None:
        """Test deserializing invalid JSON raises error."""
        with pytest.raises(DeserializationError):
            serializer.deserialize(b"not valid json")

    def test_deserialize_invalid_encoding(self, serializer: JsonSerializer) -> None:
        """Test deserializing invalid encoding raises error."""
        with pytest.raises(DeserializationError):
            serializer.deserialize(b"\xff\xfe")

    def test_serialize_circular(self, serializer: JsonSerializer) -> None:
        """Test serializing objects with circular references raises error."""
        circular: dict = {}
        circular["self"] = circular
        with pytest.raises(SerializationError):
            serializer.serialize(circular)

    def test_serialize_unsupported_type(self, serializer: JsonSerializer) -> None:
        """Test that values without a JSON form raise SerializationError."""
        with pytest.raises(SerializationError):
            serializer.serialize(object())

    def test_custom_encoding(self) -> None:
        """Test serializer with custom encoding."""
        serializer = JsonSerializer(encoding="utf-16")
        data = {"name": "Alice"}

        assert serializer.deserialize(serializer.serialize(data)) == data


class TestPickleSerializer:
    """Tests for PickleSerializer."""

    def test_preserves_types(self) -> None:
        """Test that Python types survive a round trip."""
        serializer = PickleSerializer()
        data = {"point": Point(x=1, y=2), "when": datetime(2024, 1, 15), "ids": {1, 2}}

        assert serializer.deserialize(serializer.serialize(data)) == data

    def test_serialize_unpicklable(self) -> None:
        """Test that unpicklable values raise SerializationError."""
        with pytest.raises(SerializationError):
            PickleSerializer().serialize(lambda: None)

    def test_deserialize_garbage(self) -> None:
        """Test that invalid payloads raise DeserializationError."""
        with pytest.raises(DeserializationError):
            PickleSerializer().deserialize(b"not a pickle")

    def test_deserialize_unknown_module(self) -> None:
        """Test that a payload referencing a missing module raises DeserializationError."""
        with pytest.raises(DeserializationError) as exc_info:
            PickleSerializer().deserialize(b"cnosuchmodule\nX\n.")

        assert isinstance(exc_info.value.__cause__, ImportError)

    def test_deserialize_unknown_attribute(self) -> None:
        """Test that a payload referencing a missing attribute raises DeserializationError."""
        with pytest.raises(DeserializationError):
            PickleSerializer().deserialize(b"cbuiltins\nno_such_builtin\n.")


class TestFunctionSerializer:
    """Tests for FunctionSerializer."""

    def test_uses_functions(self) -> None:
        """Test that the supplied functions do the conversion."""
        serializer = FunctionSerializer(
            lambda value: str(value).encode(),
            lambda data: int(data.decode()),
        )

        assert serializer.serialize(42) == b"42"
        assert serializer.deserialize(b"42") == 42

    def test_str_result_is_encoded(self) -> None:
        """Test that a marshal function returning str is accepted."""
        serializer = FunctionSerializer(str, bytes.decode)

        assert serializer.serialize(7) == b"7"

    def test_marshal_failure(self) -> None:
        """Test that marshal exceptions become SerializationError."""
        serializer = FunctionSerializer(lambda value: 1 / 0, bytes.decode)

        with pytest.raises(SerializationError) as exc_info:
            serializer.serialize("x")

        assert isinstance(exc_info.value.__cause__, ZeroDivisionError)

    def test_marshal_wrong_type(self) -> None:
        """Test that marshal must return bytes."""
        serializer = FunctionSerializer(lambda value: 123, bytes.decode)

        with pytest.raises(SerializationError):
            serializer.serialize("x")

    def test_unmarshal_failure(self) -> None:
        """Test that unmarshal exceptions become DeserializationError."""
        serializer = FunctionSerializer(str.encode, lambda data: int(data))

        with pytest.raises(DeserializationError):
            serializer.deserialize(b"abc")
