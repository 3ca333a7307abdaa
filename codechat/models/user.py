"""User model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from codechat.utils.time import utc_now


class User(BaseModel):
    """A registered user.

    ``code`` is the public handle every other operation refers to. ``phone``
    only serves duplicate-registration detection.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    code: str
    name: str
    phone: str
    created_at: datetime = Field(default_factory=utc_now)
