"""User registration and lookup endpoints."""

from fastapi import APIRouter

from codechat.api.deps import MessengerDep
from codechat.schemas.api import RegisterRequest, UserPublic, UserResponse

router = APIRouter(prefix="/api", tags=["Users"])


@router.post("/register", response_model=UserResponse)
async def register(body: RegisterRequest, messenger: MessengerDep) -> UserResponse:
    """Register a user by phone number and hand back their code.

    Fails with ``success: false`` if the phone number is already taken.
    """
    user = messenger.directory.register(body.name, body.phone)
    return UserResponse(user=UserPublic.from_user(user))


@router.get("/user/{user_code}", response_model=UserResponse)
async def get_user(user_code: str, messenger: MessengerDep) -> UserResponse:
    """Look up a user by code."""
    user = messenger.get_user(user_code)
    return UserResponse(user=UserPublic.from_user(user))
