"""
Collections for aggregating validation messages.

The primary collection provided is MessageCollection, a mutable ordered bag of
messages. Unlike a plain list it can be filtered by field name, serialized to
a structural form for JSON encoders, and walked with an explicit cursor that
is shared by every traversal of the same collection.
"""

from .exceptions import MessageIndexError, MessagesError, MessageTypeError
from .message_collection import MessageCollection

__all__: list[str] = [
    "MessageCollection",
    "MessageIndexError",
    "MessageTypeError",
    "MessagesError",
]
