"""Friendship model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from codechat.utils.time import utc_now


class Friendship(BaseModel):
    """Undirected edge between two user codes.

    ``user1`` is the code that asked for the friendship, but the edge is
    symmetric: ``(A, B)`` and ``(B, A)`` are the same friendship.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    user1: str
    user2: str
    created_at: datetime = Field(default_factory=utc_now)

    def involves(self, code: str) -> bool:
        return code in (self.user1, self.user2)

    def connects(self, code_a: str, code_b: str) -> bool:
        """Check if the edge joins the two codes in either orientation."""
        return {self.user1, self.user2} == {code_a, code_b}

    def other(self, code: str) -> str:
        """Return the endpoint opposite to ``code``."""
        return self.user2 if self.user1 == code else self.user1
