"""Tests for the Message class."""

import pytest
from pydantic import ValidationError

from messagekit.messages import Message, MessageProtocol


class TestMessage:
    """Tests for the Message class."""

    def test_message_defaults(self):
        """Tests that only the message text is required."""
        message = Message(message="Something went wrong")

        assert message.get_message() == "Something went wrong"
        assert message.get_field() is None
        assert message.get_type() == ""
        assert message.get_code() == 0
        assert message.get_metadata() == {}

    def test_message_str_is_text(self):
        message = Message(message="Email is required", field="email")

        # str() should return the message text
        assert str(message) == "Email is required"

    def test_message_is_frozen(self):
        message = Message(message="Email is required", field="email")

        with pytest.raises(ValidationError):
            message.field = "name"  # type: ignore[misc]

    def test_builders_return_copies(self):
        """Tests that with_* methods leave the original message untouched."""
        message = Message(message="Email is required", field="email")

        changed = (
            message.with_field("name")
            .with_type("PresenceOf")
            .with_code(7)
            .with_message("Name is required")
            .with_metadata({"min": 3})
        )

        assert message.get_field() == "email"
        assert changed.get_field() == "name"
        assert changed.get_type() == "PresenceOf"
        assert changed.get_code() == 7
        assert changed.get_message() == "Name is required"
        assert changed.get_metadata() == {"min": 3}

    def test_to_structural(self):
        message = Message(
            message="Name is too short",
            field="name",
            type="StringLength",
            code=3,
            metadata={"min": 3},
        )

        structural = message.to_structural()

        assert list(structural) == ["field", "message", "type", "code", "metadata"]
        assert structural == {
            "field": "name",
            "message": "Name is too short",
            "type": "StringLength",
            "code": 3,
            "metadata": {"min": 3},
        }

    def test_metadata_is_not_shared(self):
        """Tests that returned metadata cannot be used to mutate the message."""
        message = Message(message="Name is too short", metadata={"min": 3})

        message.get_metadata()["min"] = 10
        message.to_structural()["metadata"]["min"] = 10

        assert message.get_metadata() == {"min": 3}

    def test_message_satisfies_protocol(self):
        assert isinstance(Message(message="Email is required"), MessageProtocol)

    def test_plain_objects_do_not_satisfy_protocol(self):
        assert not isinstance("Email is required", MessageProtocol)
        assert not isinstance({"field": "email"}, MessageProtocol)
