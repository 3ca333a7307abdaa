"""Identifier and user code generation.

Ids are opaque UUID4 strings used internally. Codes are the short public
handles users share with each other, drawn from ``0-9A-Z``.
"""

import secrets
import string
import uuid

CODE_ALPHABET = string.digits + string.ascii_uppercase
DEFAULT_CODE_LENGTH = 6


class IdentitySupplier:
    """Source of unique ids and short user codes."""

    def __init__(self, code_length: int = DEFAULT_CODE_LENGTH) -> None:
        if code_length < 1:
            raise ValueError("code_length must be positive")
        self._code_length = code_length

    def new_id(self) -> str:
        """Return a new opaque identifier."""
        return str(uuid.uuid4())

    def new_code(self) -> str:
        """Return a random user code, e.g. ``"K3X9QZ"``.

        Uniqueness is not guaranteed here; the directory regenerates on
        collision.
        """
        return "".join(secrets.choice(CODE_ALPHABET) for _ in range(self._code_length))
