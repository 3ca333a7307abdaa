"""Domain models.

All records are immutable and live only in process memory.
"""

from codechat.models.user import User
from codechat.models.friendship import Friendship
from codechat.models.message import Message

__all__ = [
    "User",
    "Friendship",
    "Message",
]
