"""Tests for the serialization helpers."""

from dataclasses import dataclass

import pytest

from checkknobs_common.exceptions import SerializationError
from checkknobs_common.serialization import serialize, serialize_list


@dataclass
class Rule:
    """Simple serializable class for testing."""
    key: str
    message: str

    def to_dict(self):
        return {"key": self.key, "message": self.message}


class TestSerialize:
    """Test serialize and serialize_list."""

    def test_serialize(self):
        """Test serializing a simple object."""
        assert serialize(Rule("k", "m")) == {"key": "k", "message": "m"}

    def test_serialize_list(self):
        """Test serializing a list keeps order."""
        assert serialize_list([Rule("a", "1"), Rule("b", "2")]) == [
            {"key": "a", "message": "1"},
            {"key": "b", "message": "2"},
        ]

    def test_serialize_list_empty(self):
        """Test an empty list serializes to an empty list."""
        assert serialize_list([]) == []

    def test_serialize_without_to_dict_raises_error(self):
        """Test that serializing object without to_dict raises error."""
        with pytest.raises(SerializationError) as exc_info:
            serialize(object())
        assert "has no to_dict method" in str(exc_info.value)
        assert exc_info.value.context["type"] == "object"

    def test_serialize_to_dict_returns_non_dict_raises_error(self):
        """Test that to_dict returning non-dict raises error."""
        class BadRule:
            def to_dict(self):
                return "not a dict"

        with pytest.raises(SerializationError, match="returned str, not dict"):
            serialize(BadRule())

    def test_serialize_to_dict_raises_exception(self):
        """Test that exceptions in to_dict are wrapped."""
        class FailingRule:
            def to_dict(self):
                raise ValueError("Intentional error")

        with pytest.raises(SerializationError) as exc_info:
            serialize(FailingRule())
        assert "Intentional error" in exc_info.value.context["error"]
        assert isinstance(exc_info.value.__cause__, ValueError)
