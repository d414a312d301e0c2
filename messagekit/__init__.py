from messagekit.collections import (
    MessageCollection,
    MessageIndexError,
    MessagesError,
    MessageTypeError,
)
from messagekit.messages import Message, MessageProtocol

__all__: list[str] = [
    "Message",
    "MessageCollection",
    "MessageIndexError",
    "MessageProtocol",
    "MessageTypeError",
    "MessagesError",
]
