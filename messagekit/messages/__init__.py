"""
Message types shared by the collections in messagekit.

``MessageProtocol`` is the structural contract a collection relies on, and
``Message`` is the default immutable implementation of it.
"""

from .message import Message
from .message_protocol import MessageProtocol

__all__: list[str] = ["Message", "MessageProtocol"]
