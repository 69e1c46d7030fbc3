"""A Value Object representing an email address in the domain.

The email is the identity key across every store, so it is kept exactly as
the caller supplied it. No stripping or case folding happens here.
"""

from dataclasses import dataclass

from auth_service.core.exceptions import ValidationError


@dataclass(frozen=True, slots=True)
class Email:
    """An immutable, self-validating email address.

    Business rules enforced on instantiation:
    - Exactly one '@'.
    - Non-empty local part and non-empty domain part.

    Equality for `Email` objects is based on their string value.

    Attributes:
        value: The string representation of the email address.
    """

    value: str

    def __post_init__(self):
        """Validates the address after initialization."""
        if not isinstance(self.value, str):
            raise ValidationError("Email must be a string")
        if self.value.count("@") != 1:
            raise ValidationError("Email must contain exactly one '@'")
        local, domain = self.value.split("@")
        if not local or not domain:
            raise ValidationError("Email must have a local part and a domain")

    @classmethod
    def parse(cls, raw: str) -> "Email":
        """Parses raw input into an `Email`.

        Raises:
            ValidationError: If the input is not a well-formed address.
        """
        return cls(raw)

    @property
    def domain(self) -> str:
        """Returns the domain part of the email address."""
        return self.value.split("@")[1]

    @property
    def local_part(self) -> str:
        """Returns the local part of the email address (before the '@')."""
        return self.value.split("@")[0]

    def mask_for_logging(self) -> str:
        """Returns a masked version of the email for safe logging.

        Example: 'us**@e*****.com'
        """
        local, domain_part = self.value.split("@")
        masked_local = f"{local[:2]}{'*' * max(len(local) - 2, 0)}"
        masked_domain = f"{domain_part[:1]}{'*' * max(len(domain_part) - 2, 0)}{domain_part[-1:] if len(domain_part) > 1 else ''}"
        return f"{masked_local}@{masked_domain}"

    def __str__(self) -> str:
        return self.value
