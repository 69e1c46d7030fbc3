"""Authentication settings: token signing, challenge lifetime and hashing cost.
"""

import logging

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class AuthSettings(BaseSettings):
    """Defines settings for session tokens, 2FA challenges and password hashing.

    Security Note:
        - JWT_SECRET signs every session token. It must be long, random and
          never logged or committed; it is only ever read through
          `get_secret_value()` when the token service is built.
        - The argon2 cost parameters are explicit. Lowering them
          outside of tests weakens every stored hash.
    """

    # Session token settings
    JWT_SECRET: SecretStr
    JWT_ALGORITHM: str = Field(default="HS256", pattern="^HS(256|384|512)$")
    JWT_COOKIE_NAME: str = "jwt"
    TOKEN_TTL_HOURS: int = Field(ge=1, default=24)

    # Two-factor challenge settings
    TWO_FA_CODE_TTL_SECONDS: int = Field(ge=1, default=600)

    # Argon2id cost parameters (memory cost in KiB)
    ARGON2_TIME_COST: int = Field(ge=1, default=2)
    ARGON2_MEMORY_COST: int = Field(ge=8, default=15000)
    ARGON2_PARALLELISM: int = Field(ge=1, default=1)
    PASSWORD_HASHER_WORKERS: int = Field(ge=1, default=4)

    @field_validator("JWT_SECRET")
    @classmethod
    def validate_jwt_secret(cls, value: SecretStr) -> SecretStr:
        """Rejects an empty signing secret.

        Raises:
            ValueError: If JWT_SECRET is empty.
        """
        if not value.get_secret_value():
            logger.error("JWT_SECRET must not be empty.")
            raise ValueError("JWT_SECRET must not be empty.")
        return value
