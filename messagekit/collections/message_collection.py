"""
Mutable, ordered bag of validation messages.

MessageCollection keeps messages in insertion order and exposes them three
ways: indexed access (``offset_get``/``offset_set``/``offset_unset`` and the
matching ``[]`` operators), a cursor based traversal (``rewind``/``valid``/
``current``/``key``/``next``) and plain Python iteration, which is driven by
that same cursor.

The cursor belongs to the collection, not to an iterator object. Only one
traversal can be in progress at a time: a nested loop over the same
collection, or a deletion before the cursor position, is observed by every
traversal.

Example:
```python
from messagekit.collections import MessageCollection
from messagekit.messages import Message

messages = MessageCollection()
messages.append_message(Message(message="Email is required", field="email"))
messages.append_message(Message(message="Name is too short", field="name"))

len(messages)  # 2
messages.filter("email")  # [Message(message="Email is required", ...)]

del messages[0]
messages[0].field  # "name"
```
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from messagekit.collections.exceptions import MessageIndexError, MessageTypeError
from messagekit.messages.message_protocol import MessageProtocol

logger = logging.getLogger(__name__)


def _ensure_message(value: object) -> MessageProtocol:
    if isinstance(value, type) or not isinstance(value, MessageProtocol):
        raise MessageTypeError(
            "Expected an object implementing get_field() and to_structural(), "
            + f"got {type(value).__name__}",
            value=value,
        )
    return value


class MessageCollection:
    """
    Ordered collection of messages with a shared traversal cursor.

    Indices are always dense: valid keys are exactly ``0 .. count() - 1``.
    Removing a message shifts every later message down by one position.

    The collection is not thread safe. It is meant to be owned and mutated
    by a single caller.

    Attributes:
        _messages (list[MessageProtocol]): Stored messages in insertion order.
        _position (int): Current cursor position, never negative.
    """

    _messages: list[MessageProtocol]
    _position: int

    def __init__(self, messages: Iterable[MessageProtocol] | None = None):
        """
        Create a collection, optionally seeded with messages.

        The initial messages are stored as given. Values that do not satisfy
        the message contract are only reported once an operation needs them.

        Args:
            messages: Initial messages, in order. Defaults to an empty collection.
        """
        self._messages = list(messages) if messages is not None else []
        self._position = 0

    @classmethod
    def reconstruct_from_state(
        cls, state: Mapping[Any, Any] | Iterable[MessageProtocol]
    ) -> MessageCollection:
        """
        Rebuild a collection from a previously captured state.

        Args:
            state: Either a sequence of messages, a mapping whose values are
                messages (taken in insertion order), or a captured attribute
                mapping holding a sequence of messages under the ``"messages"``
                key. A single message stored under that key is treated as one
                of the mapping values.

        Returns:
            MessageCollection: A new collection with the same messages in the
                same order.
        """
        if isinstance(state, Mapping):
            captured = state.get("messages")
            if captured is not None and not isinstance(captured, MessageProtocol):
                return cls(captured)
            return cls(state.values())

        return cls(state)

    def append_message(self, message: MessageProtocol) -> MessageCollection:
        """Append a message at the end of the collection and return the collection."""
        self._messages.append(_ensure_message(message))
        logger.debug(f"Appended message at index {len(self._messages) - 1}")
        return self

    def append_messages(self, messages: Iterable[MessageProtocol]) -> MessageCollection:
        """
        Append several messages, keeping their order.

        Every message is checked before any of them is stored, so either all
        of them are appended or, if one fails the check, none is.

        When ``messages`` is another MessageCollection it is walked through its
        own cursor, which is left past the end afterwards.

        Args:
            messages: Any iterable of messages, including another collection.

        Raises:
            MessageTypeError: If ``messages`` is not iterable or one of its
                elements does not satisfy the message contract.

        Returns:
            MessageCollection: This collection, for chaining.
        """
        if isinstance(messages, (str, bytes)) or not isinstance(messages, Iterable):
            raise MessageTypeError("The messages must be iterable", value=messages)

        pending = [_ensure_message(message) for message in messages]
        if not pending:
            logger.warning("No messages given. Skipping append.")
            return self

        self._messages.extend(pending)
        logger.debug(f"Appended {len(pending)} messages")
        return self

    def count(self) -> int:
        return len(self._messages)

    def current(self) -> MessageProtocol | None:
        """Message under the cursor, or None when the cursor is out of bounds."""
        if not self.valid():
            return None
        return self._messages[self._position]

    def key(self) -> int:
        return self._position

    def next(self) -> None:
        self._position += 1

    def rewind(self) -> None:
        self._position = 0

    def valid(self) -> bool:
        return 0 <= self._position < len(self._messages)

    def offset_exists(self, index: object) -> bool:
        """True when ``index`` is an integer pointing at a stored message."""
        return (
            isinstance(index, int)
            and not isinstance(index, bool)
            and 0 <= index < len(self._messages)
        )

    def offset_get(self, index: object) -> MessageProtocol:
        """
        Return the message stored at ``index``.

        Raises:
            MessageIndexError: If no message is stored at ``index``.
        """
        if not self.offset_exists(index):
            raise MessageIndexError(f"No message at index {index!r}", index=index)
        return self._messages[index]  # type: ignore[index]

    def offset_set(self, index: int | None, message: MessageProtocol) -> None:
        """
        Replace the message at ``index``, or append it when ``index`` is None.

        Replacing keeps the position of every other message.

        Raises:
            MessageTypeError: If ``message`` does not satisfy the message contract.
            MessageIndexError: If ``index`` is neither None nor an existing index.
        """
        message = _ensure_message(message)

        if index is None:
            self._messages.append(message)
            logger.debug(f"Appended message at index {len(self._messages) - 1}")
            return

        if not self.offset_exists(index):
            raise MessageIndexError(
                f"Cannot set message at index {index!r}; "
                + "use None to append a new message",
                index=index,
            )

        self._messages[index] = message
        logger.debug(f"Replaced message at index {index}")

    def offset_unset(self, index: object) -> None:
        """
        Remove the message at ``index`` and shift later messages down.

        Removing an index that does not exist does nothing. The cursor is not
        adjusted, so a traversal in progress may skip the message that moved
        into the removed slot.
        """
        if not self.offset_exists(index):
            logger.debug(f"No message at index {index!r}. Nothing to remove.")
            return

        del self._messages[index]  # type: ignore[arg-type]
        logger.debug(f"Removed message at index {index}")

    def filter(self, field_name: str) -> list[MessageProtocol]:
        """
        Messages whose field equals ``field_name``, in collection order.

        Neither the collection nor its cursor is modified.

        Raises:
            MessageTypeError: If a stored value does not satisfy the message contract.
        """
        return [
            message
            for message in map(_ensure_message, self._messages)
            if message.get_field() == field_name
        ]

    def json_serialize(self) -> list[dict[str, Any]]:
        """
        Structural form of every message, in collection order.

        Nothing is encoded here; the result is meant to be handed to a JSON
        (or similar) encoder.

        Raises:
            MessageTypeError: If a stored value does not satisfy the message contract.
        """
        return [
            message.to_structural() for message in map(_ensure_message, self._messages)
        ]

    def to_json(self, **kwargs: Any) -> str:
        """Encode ``json_serialize()`` with ``json.dumps``, forwarding ``kwargs``."""
        return json.dumps(self.json_serialize(), **kwargs)

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[MessageProtocol]:
        self.rewind()
        while self.valid():
            yield self._messages[self._position]
            self.next()

    def __contains__(self, message: object) -> bool:
        return message in self._messages

    def __getitem__(self, index: int) -> MessageProtocol:
        return self.offset_get(index)

    def __setitem__(self, index: int | None, message: MessageProtocol) -> None:
        self.offset_set(index, message)

    def __delitem__(self, index: int) -> None:
        self.offset_unset(index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MessageCollection):
            return NotImplemented
        return self._messages == other._messages

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"MessageCollection({self._messages!r})"
