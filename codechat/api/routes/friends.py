"""Friendship and chat list endpoints."""

from fastapi import APIRouter

from codechat.api.deps import MessengerDep
from codechat.schemas.api import AddFriendRequest, ChatsResponse, StatusResponse

router = APIRouter(prefix="/api", tags=["Friends"])

FRIEND_ADDED_MESSAGE = "Друг успешно добавлен"


@router.post("/add-friend", response_model=StatusResponse)
async def add_friend(body: AddFriendRequest, messenger: MessengerDep) -> StatusResponse:
    """Add a friend by code.

    Fails with ``success: false`` when either code is unknown, when the codes
    are the same, or when the two users are already friends.
    """
    messenger.friends.add_friendship(body.user_code, body.friend_code)
    return StatusResponse(success=True, message=FRIEND_ADDED_MESSAGE)


@router.get("/chats/{user_code}", response_model=ChatsResponse)
async def get_chats(user_code: str, messenger: MessengerDep) -> ChatsResponse:
    """List a user's friends with the last message of each chat."""
    return ChatsResponse(chats=messenger.chats.chats_for(user_code))
