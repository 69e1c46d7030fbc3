"""Session token value object.

A `Token` is only checked for shape here: three non-empty, dot-separated
segments. Signature, expiry and claims are the token service's concern.
"""

from dataclasses import dataclass

from pydantic import SecretStr

from auth_service.core.exceptions import ValidationError


@dataclass(frozen=True, slots=True)
class Token:
    """An opaque, structurally valid JWT string.

    The raw string is a bearer credential and is wrapped in `SecretStr`.
    Equality and hashing use the raw value so tokens can be kept in sets.

    Attributes:
        value: The secret token string.
    """

    value: SecretStr

    def __post_init__(self):
        if isinstance(self.value, str):
            object.__setattr__(self, "value", SecretStr(self.value))
        if not isinstance(self.value, SecretStr):
            raise ValidationError("Token must be a string")
        segments = self.value.get_secret_value().split(".")
        if len(segments) != 3 or not all(segments):
            raise ValidationError("Token must have three non-empty segments")

    @classmethod
    def parse(cls, raw: str) -> "Token":
        """Parses raw input into a `Token`.

        Raises:
            ValidationError: If the input is not shaped like a JWT. The
                authentication services report this as a malformed token.
        """
        return cls(raw)

    def expose_secret(self) -> str:
        return self.value.get_secret_value()

    def mask_for_logging(self) -> str:
        """Returns the first characters of the token followed by an ellipsis."""
        return f"{self.expose_secret()[:10]}..."

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Token):
            return self.expose_secret() == other.expose_secret()
        return False

    def __hash__(self) -> int:
        return hash(self.expose_secret())

    def __str__(self) -> str:
        return "**********"
