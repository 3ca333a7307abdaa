"""Messenger wiring.

Ties the directory, friend graph, message log and chat projector together
around a single identity supplier. Locks are always taken in the order
directory -> friend graph -> message log.
"""

import logging

from codechat.config import Settings
from codechat.models.user import User
from codechat.services.chats import ChatSummaryProjector
from codechat.services.directory import Directory
from codechat.services.errors import UserNotFoundError
from codechat.services.friend_graph import FriendGraph
from codechat.services.message_log import MessageLog
from codechat.utils.identity import IdentitySupplier

logger = logging.getLogger(__name__)


class Messenger:
    """Process-wide owner of all messaging state."""

    def __init__(self, identity: IdentitySupplier | None = None, code_max_attempts: int = 10) -> None:
        self.identity = identity or IdentitySupplier()
        self.directory = Directory(self.identity, code_max_attempts=code_max_attempts)
        self.friends = FriendGraph(self.directory, self.identity)
        self.messages = MessageLog(self.directory, self.friends, self.identity)
        self.chats = ChatSummaryProjector(self.directory, self.friends, self.messages)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Messenger":
        return cls(
            identity=IdentitySupplier(code_length=settings.user_code_length),
            code_max_attempts=settings.code_max_attempts,
        )

    def get_user(self, code: str) -> User:
        """Resolve a user code.

        Raises:
            UserNotFoundError: If the code is not registered
        """
        user = self.directory.find_by_code(code)
        if user is None:
            logger.warning(f"User lookup failed: {code}")
            raise UserNotFoundError()
        return user

    def counts(self) -> dict[str, int]:
        """Sizes of every store, read as one consistent snapshot."""
        with self.directory.lock, self.friends.lock, self.messages.lock:
            return {
                "users": len(self.directory),
                "friendships": len(self.friends),
                "messages": len(self.messages),
            }
