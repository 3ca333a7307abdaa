"""Friendship graph.

An undirected relation over user codes. Edges are kept in insertion order,
which is also the order in which a user's chats are listed.
"""

import logging
import threading

from codechat.models.friendship import Friendship
from codechat.services.directory import Directory
from codechat.services.errors import (
    AlreadyFriendsError,
    SelfFriendshipError,
    UserNotFoundError,
)
from codechat.utils.identity import IdentitySupplier

logger = logging.getLogger(__name__)


class FriendGraph:
    """In-memory store of friendships between user codes."""

    def __init__(self, directory: Directory, identity: IdentitySupplier) -> None:
        self.lock = threading.RLock()
        self._directory = directory
        self._identity = identity
        self._edges: list[Friendship] = []

    def __len__(self) -> int:
        with self.lock:
            return len(self._edges)

    def add_friendship(self, user_code: str, friend_code: str) -> Friendship:
        """Create a friendship between two registered users.

        Args:
            user_code: Code of the user adding a friend
            friend_code: Code of the user being added

        Returns:
            The new friendship edge

        Raises:
            UserNotFoundError: If either code is not registered
            SelfFriendshipError: If both codes are the same
            AlreadyFriendsError: If the pair is already connected
        """
        with self._directory.lock, self.lock:
            user = self._directory.find_by_code(user_code)
            friend = self._directory.find_by_code(friend_code)
            if user is None or friend is None:
                logger.warning(f"Add friend failed, unknown code in ({user_code}, {friend_code})")
                raise UserNotFoundError()

            if user.code == friend.code:
                logger.warning(f"Add friend failed, {user_code} tried to add themselves")
                raise SelfFriendshipError()

            if self.are_friends(user.code, friend.code):
                logger.warning(f"Add friend failed, {user_code} and {friend_code} are already friends")
                raise AlreadyFriendsError()

            friendship = Friendship(
                id=self._identity.new_id(),
                user1=user.code,
                user2=friend.code,
            )
            self._edges.append(friendship)

        logger.info(f"Friendship created: {friendship.user1} <-> {friendship.user2}")
        return friendship

    def are_friends(self, code_a: str, code_b: str) -> bool:
        """Check if an edge joins the two codes in either orientation."""
        with self.lock:
            return any(edge.connects(code_a, code_b) for edge in self._edges)

    def friends_of(self, user_code: str) -> list[str]:
        """List the codes connected to ``user_code``, in edge insertion order."""
        with self.lock:
            return [edge.other(user_code) for edge in self._edges if edge.involves(user_code)]
