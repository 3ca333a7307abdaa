"""Message log.

Append-only list of messages between pairs of friends. Messages are kept
forever in the order they were sent.
"""

import logging
import threading

from codechat.models.message import Message
from codechat.services.directory import Directory
from codechat.services.errors import NotFriendsError, UserNotFoundError
from codechat.services.friend_graph import FriendGraph
from codechat.utils.identity import IdentitySupplier

logger = logging.getLogger(__name__)


class MessageLog:
    """In-memory store of messages between user codes."""

    def __init__(
        self,
        directory: Directory,
        graph: FriendGraph,
        identity: IdentitySupplier,
    ) -> None:
        self.lock = threading.RLock()
        self._directory = directory
        self._graph = graph
        self._identity = identity
        self._messages: list[Message] = []

    def __len__(self) -> int:
        with self.lock:
            return len(self._messages)

    def append(self, from_code: str, to_code: str, text: str) -> Message:
        """Send a message from one user to a friend.

        The text is stored verbatim, empty strings included.

        Args:
            from_code: Sender code
            to_code: Recipient code
            text: Message body

        Returns:
            The stored message

        Raises:
            UserNotFoundError: If either code is not registered
            NotFriendsError: If the two users are not friends
        """
        with self._directory.lock, self._graph.lock, self.lock:
            sender = self._directory.find_by_code(from_code)
            recipient = self._directory.find_by_code(to_code)
            if sender is None or recipient is None:
                logger.warning(f"Send failed, unknown code in ({from_code}, {to_code})")
                raise UserNotFoundError()

            if not self._graph.are_friends(from_code, to_code):
                logger.warning(f"Send failed, {from_code} and {to_code} are not friends")
                raise NotFriendsError()

            message = Message(
                id=self._identity.new_id(),
                from_user=from_code,
                to_user=to_code,
                text=text,
            )
            self._messages.append(message)

        logger.info(f"Message {message.id} sent: {from_code} -> {to_code}")
        return message

    def between(self, code_a: str, code_b: str) -> list[Message]:
        """Conversation between two codes, oldest first.

        Messages sharing a timestamp keep the order they were sent in.
        """
        with self.lock:
            chat = [m for m in self._messages if m.in_pair(code_a, code_b)]
        return sorted(chat, key=lambda m: m.timestamp)

    def last_between(self, code_a: str, code_b: str) -> Message | None:
        """Most recent message between two codes, or None. Ties go to the latest send."""
        chat = self.between(code_a, code_b)
        return chat[-1] if chat else None
