"""SQLModel table definitions for the Postgres user store."""

from sqlmodel import Field, SQLModel


class UserRecord(SQLModel, table=True):
    """A row of the `users` table.

    Attributes:
        email: The user's email exactly as registered (primary key).
        password_hash: PHC-format argon2id hash.
        requires_2fa: Whether login needs an emailed code.
    """

    __tablename__ = "users"

    email: str = Field(primary_key=True, max_length=320, description="The user's email address.")
    password_hash: str = Field(nullable=False, description="argon2id hash of the password.")
    requires_2fa: bool = Field(default=False, nullable=False, description="Whether 2FA is required.")
