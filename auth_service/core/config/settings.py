"""Main application settings and configuration management.

This module composes all the application settings from the different modules
(app, auth, database, redis, email) into a single `Settings` class.

It loads settings from environment variables and .env files and validates
them. Nothing in the domain layer reads settings directly: the values are
handed to the token service, the password hasher and the stores when they
are built in `auth_service.infrastructure.dependency_injection.container`.

Environment Support:
- Development: Uses .env
- Test: Uses .env.test when present
- Staging / Production: Use .env.staging / .env.production when present
"""

import logging
import os
from functools import lru_cache
from pathlib import Path

from pydantic import model_validator
from pydantic_settings import SettingsConfigDict

from .app import AppSettings
from .auth import AuthSettings
from .database import DatabaseSettings
from .email import EmailSettings
from .redis import RedisSettings

logger = logging.getLogger(__name__)
logging.getLogger("passlib").setLevel(logging.ERROR)


class Settings(AppSettings, AuthSettings, DatabaseSettings, RedisSettings, EmailSettings):
    """The main settings class that aggregates all application configurations.

    Security Note:
        - JWT_SECRET, DATABASE_URL, REDIS_PASSWORD and the SMTP password are
          SecretStr fields and are never rendered by `repr()` or logs.
        - Production refuses EMAIL_BACKEND="mock": 2FA codes would never leave
          the process.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    @model_validator(mode="after")
    def _reject_mock_email_in_production(self) -> "Settings":
        if self.APP_ENV == "production" and self.EMAIL_BACKEND == "mock":
            error_msg = "EMAIL_BACKEND=mock is not allowed when APP_ENV=production"
            logger.error(error_msg)
            raise ValueError(error_msg)
        return self


def create_settings() -> Settings:
    """Create a settings instance with environment-specific configuration.

    Returns:
        Settings: Configured settings instance
    """
    env = os.getenv("APP_ENV", "development")

    env_files = {
        "development": ".env",
        "test": ".env.test",
        "staging": ".env.staging",
        "production": ".env.production",
    }
    env_file = env_files.get(env, ".env")

    if env != "development" and Path(env_file).exists():
        logger.info(f"Loading environment configuration from {env_file}")
        return Settings(_env_file=env_file)
    if Path(".env").exists():
        logger.info(f"Loading environment configuration from .env (environment: {env})")
    else:
        logger.warning(
            f"No .env file found, using environment variables only (environment: {env})"
        )
    return Settings()


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, created on first use."""
    return create_settings()
