"""Chat list projection.

Builds a user's chat list on demand from the friend graph, the directory and
the message log. Nothing is cached.
"""

import logging

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from codechat.services.directory import Directory
from codechat.services.friend_graph import FriendGraph
from codechat.services.message_log import MessageLog

logger = logging.getLogger(__name__)


class ChatSummary(BaseModel):
    """One entry in a user's chat list."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    user_code: str
    name: str
    last_message: str | None = None


class ChatSummaryProjector:
    """Read-side view of a user's friends and their latest messages."""

    def __init__(self, directory: Directory, graph: FriendGraph, log: MessageLog) -> None:
        self._directory = directory
        self._graph = graph
        self._log = log

    def chats_for(self, user_code: str) -> list[ChatSummary]:
        """List chats for a user.

        One entry per friend, in the order the friendships were created.
        Friends missing from the directory are skipped. Unknown codes get an
        empty list.
        """
        chats: list[ChatSummary] = []
        with self._directory.lock, self._graph.lock, self._log.lock:
            for friend_code in self._graph.friends_of(user_code):
                friend = self._directory.find_by_code(friend_code)
                if friend is None:
                    logger.warning(f"Dangling friendship {user_code} <-> {friend_code}, skipping")
                    continue

                last = self._log.last_between(user_code, friend_code)
                chats.append(
                    ChatSummary(
                        user_code=friend.code,
                        name=friend.name,
                        last_message=last.text if last else None,
                    )
                )

        logger.debug(f"Built {len(chats)} chats for {user_code}")
        return chats
