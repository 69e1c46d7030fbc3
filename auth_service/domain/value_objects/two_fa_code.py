"""Six-digit one-time code for the second authentication factor."""

import secrets
from dataclasses import dataclass
from typing import ClassVar

from auth_service.core.exceptions import ValidationError


@dataclass(frozen=True, slots=True)
class TwoFACode:
    """Exactly six ASCII digits.

    Generated codes are drawn uniformly from [100000, 999999] with a CSPRNG,
    so a generated code never has a leading zero. Parsing still accepts any
    six ASCII digits, e.g. "012345".

    Attributes:
        value: The six-digit code.
    """

    value: str

    LENGTH: ClassVar[int] = 6
    LOWEST: ClassVar[int] = 100_000
    HIGHEST: ClassVar[int] = 999_999

    def __post_init__(self):
        if (
            not isinstance(self.value, str)
            or len(self.value) != self.LENGTH
            or not all(c in "0123456789" for c in self.value)
        ):
            raise ValidationError("2FA code must be exactly 6 digits")

    @classmethod
    def parse(cls, raw: str) -> "TwoFACode":
        """Parses raw input into a `TwoFACode`.

        Raises:
            ValidationError: Unless the input is exactly six ASCII digits.
        """
        return cls(raw)

    @classmethod
    def generate(cls) -> "TwoFACode":
        return cls(str(cls.LOWEST + secrets.randbelow(cls.HIGHEST - cls.LOWEST + 1)))

    def __str__(self) -> str:
        return self.value
