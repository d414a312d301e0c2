from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MessageProtocol(Protocol):
    """
    Contract every value stored in a MessageCollection must satisfy.

    Only the two accessors the collection actually calls are required:
    ``get_field`` for filtering and ``to_structural`` for serialization.
    """

    def get_field(self) -> str | None: ...

    def to_structural(self) -> dict[str, Any]: ...
