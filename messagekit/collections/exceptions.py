"""
Exceptions raised by message collections.

Both concrete errors also derive from the matching built-in exception, so
callers that already handle ``TypeError`` or ``IndexError`` keep working.
"""


class MessagesError(Exception):
    """Base exception for message collection errors."""


class MessageTypeError(MessagesError, TypeError):
    """Raised when a value does not satisfy the message contract."""

    def __init__(self, message: str, value: object | None = None):
        super().__init__(message)
        self.value = value


class MessageIndexError(MessagesError, IndexError):
    """Raised when an index does not point at a stored message."""

    def __init__(self, message: str, index: object | None = None):
        super().__init__(message)
        self.index = index
