"""Messaging endpoints."""

import logging

from fastapi import APIRouter

from codechat.api.deps import MessengerDep
from codechat.schemas.api import MessagesResponse, SendMessageRequest, StatusResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Messages"])

MESSAGE_SENT_MESSAGE = "Сообщение отправлено"


@router.post("/send-message", response_model=StatusResponse)
async def send_message(body: SendMessageRequest, messenger: MessengerDep) -> StatusResponse:
    """Send a message to a friend."""
    messenger.messages.append(body.from_user, body.to_user, body.text)
    return StatusResponse(success=True, message=MESSAGE_SENT_MESSAGE)


@router.get("/messages/{user_code}/{friend_code}", response_model=MessagesResponse)
async def get_messages(user_code: str, friend_code: str, messenger: MessengerDep) -> MessagesResponse:
    """Return the conversation between two users, oldest first.

    Unknown codes simply yield an empty list.
    """
    messages = messenger.messages.between(user_code, friend_code)
    logger.debug(f"Returning {len(messages)} messages for {user_code} <-> {friend_code}")
    return MessagesResponse(messages=messages)
