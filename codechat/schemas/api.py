"""Pydantic schemas for the public HTTP API.

Request and response bodies use the camelCase keys the web client expects.
Every response carries a ``success`` flag; HTTP status is always 200.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from codechat.models.message import Message
from codechat.models.user import User
from codechat.services.chats import ChatSummary


class CamelModel(BaseModel):
    """Base schema that reads and writes camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# Requests
# ============================================================================

class RegisterRequest(CamelModel):
    """Body of POST /api/register."""
    name: str
    phone: str


class AddFriendRequest(CamelModel):
    """Body of POST /api/add-friend."""
    user_code: str
    friend_code: str


class SendMessageRequest(CamelModel):
    """Body of POST /api/send-message. Empty text is allowed."""
    from_user: str
    to_user: str
    text: str


# ============================================================================
# Responses
# ============================================================================

class UserPublic(CamelModel):
    """Public view of a user."""
    code: str
    name: str
    phone: str

    @classmethod
    def from_user(cls, user: User) -> "UserPublic":
        return cls(code=user.code, name=user.name, phone=user.phone)


class UserResponse(CamelModel):
    """Returned by register and user lookup."""
    success: bool = True
    user: UserPublic


class StatusResponse(CamelModel):
    """Success flag plus a human-readable message."""
    success: bool
    message: str


class ChatsResponse(CamelModel):
    success: bool = True
    chats: list[ChatSummary]


class MessagesResponse(CamelModel):
    success: bool = True
    messages: list[Message]
