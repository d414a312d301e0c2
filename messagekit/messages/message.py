"""
Concrete validation message.

A Message is one unit of feedback, usually produced by a validator: the text
shown to the user, the field it refers to, a free-form type such as
``"PresenceOf"`` and an optional numeric code.

Example:
```python
from messagekit.messages import Message

message = Message(message="Email is required", field="email", type="PresenceOf")

str(message)  # "Email is required"
message.to_structural()
# {"field": "email", "message": "Email is required", "type": "PresenceOf",
#  "code": 0, "metadata": {}}
```
"""

from __future__ import annotations

from typing import Any

from rsb.models.base_model import BaseModel
from rsb.models.config_dict import ConfigDict
from rsb.models.field import Field


class Message(BaseModel):
    """
    Immutable validation message.

    Attributes:
        message (str): Human readable text of the message.
        field (str | None): Name of the field the message refers to, if any.
        type (str): Kind of message, typically the name of the validator.
        code (int): Numeric code, 0 when not set.
        metadata (dict[str, Any]): Extra data attached by the producer.
    """

    message: str = Field(description="Human readable text of the message.")

    field: str | None = Field(
        default=None,
        description="Name of the field the message refers to.",
    )

    type: str = Field(
        default="",
        description="Kind of message, usually the validator that produced it.",
    )

    code: int = Field(default=0, description="Numeric code of the message.")

    metadata: dict[str, Any] = Field(
        default_factory=dict,
        description="Extra data attached by the producer of the message.",
    )

    model_config = ConfigDict(frozen=True)

    def get_message(self) -> str:
        return self.message

    def get_field(self) -> str | None:
        return self.field

    def get_type(self) -> str:
        return self.type

    def get_code(self) -> int:
        return self.code

    def get_metadata(self) -> dict[str, Any]:
        return dict(self.metadata)

    def with_message(self, message: str) -> Message:
        return self.model_copy(update={"message": message})

    def with_field(self, field: str | None) -> Message:
        return self.model_copy(update={"field": field})

    def with_type(self, type: str) -> Message:
        return self.model_copy(update={"type": type})

    def with_code(self, code: int) -> Message:
        return self.model_copy(update={"code": code})

    def with_metadata(self, metadata: dict[str, Any]) -> Message:
        return self.model_copy(update={"metadata": dict(metadata)})

    def to_structural(self) -> dict[str, Any]:
        """
        Plain mapping form of the message, ready for a JSON encoder.

        Keys are always emitted in the same order: field, message, type,
        code, metadata.
        """
        return {
            "field": self.field,
            "message": self.message,
            "type": self.type,
            "code": self.code,
            "metadata": dict(self.metadata),
        }

    def __str__(self) -> str:
        return self.message
