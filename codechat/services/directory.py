"""User directory.

Holds every registered user. Phone numbers are unique and only used to
reject duplicate registrations; codes are unique and are the lookup handle
for all other operations.
"""

import logging
import threading

from codechat.models.user import User
from codechat.services.errors import CodeAllocationError, DuplicatePhoneError
from codechat.utils.identity import IdentitySupplier

logger = logging.getLogger(__name__)


class Directory:
    """In-memory store of registered users.

    Usage:
        directory = Directory(IdentitySupplier())
        user = directory.register("Alice", "+15550100")
        directory.find_by_code(user.code)
    """

    def __init__(self, identity: IdentitySupplier, code_max_attempts: int = 10) -> None:
        """Initialize an empty directory.

        Args:
            identity: Supplier of ids and user codes
            code_max_attempts: How many codes to try before giving up when
                generated codes keep colliding with existing ones
        """
        self.lock = threading.RLock()
        self._identity = identity
        self._code_max_attempts = max(1, code_max_attempts)
        self._users: list[User] = []
        self._by_code: dict[str, User] = {}
        self._by_phone: dict[str, User] = {}

    def __len__(self) -> int:
        with self.lock:
            return len(self._users)

    def register(self, name: str, phone: str) -> User:
        """Register a new user.

        Args:
            name: Display name
            phone: Phone number, compared by exact string match

        Returns:
            The stored user with a freshly allocated id and code

        Raises:
            DuplicatePhoneError: If the phone number is already registered
            CodeAllocationError: If every generated code collided
        """
        with self.lock:
            if self.find_by_phone(phone) is not None:
                logger.warning(f"Registration rejected, phone already registered: {phone}")
                raise DuplicatePhoneError()

            user = User(
                id=self._identity.new_id(),
                code=self._allocate_code(),
                name=name,
                phone=phone,
            )
            self._users.append(user)
            self._by_code[user.code] = user
            self._by_phone[user.phone] = user

        logger.info(f"Registered user {user.code}")
        return user

    def find_by_code(self, code: str) -> User | None:
        with self.lock:
            return self._by_code.get(code)

    def find_by_phone(self, phone: str) -> User | None:
        with self.lock:
            return self._by_phone.get(phone)

    def _allocate_code(self) -> str:
        for attempt in range(1, self._code_max_attempts + 1):
            code = self._identity.new_code()
            if code not in self._by_code:
                return code
            logger.warning(f"User code collision on attempt {attempt}: {code}")

        logger.error(f"Could not allocate a user code after {self._code_max_attempts} attempts")
        raise CodeAllocationError()
