"""Domain errors raised by the messaging stores.

Every error carries the human-readable ``message`` that the API hands back
to clients inside a ``{"success": false}`` envelope.
"""


class MessengerError(Exception):
    """Base exception for messaging domain errors."""

    default_message = "Ошибка запроса"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class DuplicatePhoneError(MessengerError):
    """Raised when a phone number is already registered."""

    default_message = "Пользователь с таким номером уже существует"


class UserNotFoundError(MessengerError):
    """Raised when a user code does not resolve to a registered user."""

    default_message = "Пользователь не найден"


class SelfFriendshipError(MessengerError):
    """Raised when a user tries to befriend themselves."""

    default_message = "Нельзя добавить самого себя"


class AlreadyFriendsError(MessengerError):
    """Raised when the pair already shares a friendship."""

    default_message = "Пользователь уже в списке друзей"


class NotFriendsError(MessengerError):
    """Raised when messaging a user who is not a friend."""

    default_message = "Пользователь не в списке друзей"


class CodeAllocationError(MessengerError):
    """Raised when no unused user code could be generated."""

    default_message = "Не удалось выделить код пользователя"


class InvalidRequestError(MessengerError):
    """Raised when a request body is missing or has malformed fields."""

    default_message = "Некорректный запрос"
