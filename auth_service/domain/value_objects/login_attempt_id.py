"""Identifier of a single pending 2FA challenge."""

import uuid
from dataclasses import dataclass

from auth_service.core.exceptions import ValidationError


@dataclass(frozen=True, slots=True)
class LoginAttemptId:
    """A random v4 UUID kept in canonical lower-case hyphenated form.

    Attributes:
        value: Canonical UUID text.
    """

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise ValidationError("Invalid login attempt ID")
        try:
            canonical = str(uuid.UUID(self.value))
        except ValueError as e:
            raise ValidationError("Invalid login attempt ID") from e
        object.__setattr__(self, "value", canonical)

    @classmethod
    def parse(cls, raw: str) -> "LoginAttemptId":
        """Parses raw input into a `LoginAttemptId`.

        Raises:
            ValidationError: If the input is not a UUID.
        """
        return cls(raw)

    @classmethod
    def generate(cls) -> "LoginAttemptId":
        return cls(str(uuid.uuid4()))

    def __str__(self) -> str:
        return self.value
