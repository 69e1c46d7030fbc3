"""Password value objects.

`Password` is the plaintext secret supplied at signup or login; it lives only
for the duration of a request. `HashedPassword` is the PHC-format argon2
string that is the only form ever persisted.
"""

from dataclasses import dataclass
from typing import ClassVar

from pydantic import SecretStr

from auth_service.core.exceptions import ValidationError


@dataclass(frozen=True, slots=True)
class Password:
    """A plaintext password that meets the minimum length rule.

    The raw value is wrapped in a `SecretStr`, so `str()` and `repr()` never
    show it. Use `expose_secret()` at the single point where the hasher needs
    the bytes.

    Attributes:
        value: The secret password.
    """

    value: SecretStr

    MIN_LENGTH: ClassVar[int] = 8

    def __post_init__(self):
        if isinstance(self.value, str):
            object.__setattr__(self, "value", SecretStr(self.value))
        if not isinstance(self.value, SecretStr):
            raise ValidationError("Password must be a string")
        if len(self.value.get_secret_value()) < self.MIN_LENGTH:
            raise ValidationError(
                f"Password must be at least {self.MIN_LENGTH} characters long"
            )

    @classmethod
    def parse(cls, raw: str) -> "Password":
        """Parses raw input into a `Password`.

        Raises:
            ValidationError: If the password is shorter than `MIN_LENGTH`.
        """
        return cls(raw)

    def expose_secret(self) -> str:
        return self.value.get_secret_value()

    def __str__(self) -> str:
        return "**********"


@dataclass(frozen=True, slots=True)
class HashedPassword:
    """A PHC-format argon2 password hash, e.g. `$argon2id$v=19$m=...`."""

    value: str

    PREFIX: ClassVar[str] = "$argon2"

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.startswith(self.PREFIX):
            raise ValidationError("Invalid password hash format")

    def __str__(self) -> str:
        return self.value
