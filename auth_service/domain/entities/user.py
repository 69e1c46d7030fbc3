"""The User entity.

A user is created once at signup and read on every login. It is never
mutated afterwards, so it is modelled as a frozen dataclass rather than an
ORM row; the Postgres adapter maps it onto its own table model.
"""

from dataclasses import dataclass

from auth_service.domain.value_objects import Email, HashedPassword


@dataclass(frozen=True, slots=True)
class User:
    """A registered account.

    Attributes:
        email: The identity key of the account.
        hashed_password: argon2id hash of the password. The plaintext is never kept.
        requires_2fa: Whether login must be completed with an emailed code.
    """

    email: Email
    hashed_password: HashedPassword
    requires_2fa: bool = False
