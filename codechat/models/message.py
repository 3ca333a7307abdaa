"""Message model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

from codechat.utils.time import to_iso_millis, utc_now


class Message(BaseModel):
    """A text message sent from one user code to another.

    Serializes with the camelCase keys clients expect
    (``fromUser``, ``toUser``) and a millisecond ISO timestamp.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    from_user: str
    to_user: str
    text: str
    timestamp: datetime = Field(default_factory=utc_now)

    def in_pair(self, code_a: str, code_b: str) -> bool:
        """Check if the message belongs to the conversation between two codes."""
        return (self.from_user == code_a and self.to_user == code_b) or (
            self.from_user == code_b and self.to_user == code_a
        )

    @field_serializer("timestamp")
    def _serialize_timestamp(self, value: datetime) -> str:
        return to_iso_millis(value)
