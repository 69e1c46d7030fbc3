"""Unit tests for the settings layer."""

import pytest
from pydantic import SecretStr
from pydantic import ValidationError as PydanticValidationError

from auth_service.core.config.settings import Settings


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None, JWT_SECRET=SecretStr("x" * 32))

        assert settings.TOKEN_TTL_HOURS == 24
        assert settings.TWO_FA_CODE_TTL_SECONDS == 600
        assert settings.JWT_COOKIE_NAME == "jwt"
        assert settings.JWT_ALGORITHM == "HS256"
        assert (settings.ARGON2_TIME_COST, settings.ARGON2_MEMORY_COST, settings.ARGON2_PARALLELISM) == (
            2,
            15000,
            1,
        )
        assert settings.STORE_BACKEND == "memory"
        assert settings.EMAIL_BACKEND == "mock"

    def test_jwt_secret_is_required(self, monkeypatch):
        monkeypatch.delenv("JWT_SECRET", raising=False)

        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None)

    def test_empty_jwt_secret_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, JWT_SECRET=SecretStr(""))

    def test_secret_not_in_repr(self):
        settings = Settings(_env_file=None, JWT_SECRET=SecretStr("very-secret-signing-key-123456789"))

        assert "very-secret-signing-key" not in repr(settings)

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET", "env-secret-that-is-at-least-32-bytes")
        monkeypatch.setenv("TOKEN_TTL_HOURS", "1")
        monkeypatch.setenv("STORE_BACKEND", "persistent")

        settings = Settings(_env_file=None)

        assert settings.JWT_SECRET.get_secret_value() == "env-secret-that-is-at-least-32-bytes"
        assert settings.TOKEN_TTL_HOURS == 1
        assert settings.STORE_BACKEND == "persistent"

    def test_unknown_store_backend_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, JWT_SECRET=SecretStr("x" * 32), STORE_BACKEND="sqlite")

    def test_redis_url_assembled(self):
        settings = Settings(
            _env_file=None,
            JWT_SECRET=SecretStr("x" * 32),
            REDIS_HOST="cache",
            REDIS_PORT=6380,
            REDIS_PASSWORD=SecretStr("pw"),
        )

        assert settings.REDIS_URL == "redis://:pw@cache:6380/0"

    def test_redis_url_explicit(self):
        settings = Settings(
            _env_file=None, JWT_SECRET=SecretStr("x" * 32), REDIS_URL="redis://other:1/2"
        )

        assert settings.REDIS_URL == "redis://other:1/2"

    def test_mock_email_backend_rejected_in_production(self):
        with pytest.raises(PydanticValidationError):
            Settings(
                _env_file=None,
                JWT_SECRET=SecretStr("x" * 32),
                APP_ENV="production",
                EMAIL_BACKEND="mock",
            )

    def test_smtp_email_backend_accepted_in_production(self):
        settings = Settings(
            _env_file=None,
            JWT_SECRET=SecretStr("x" * 32),
            APP_ENV="production",
            EMAIL_BACKEND="smtp",
        )

        assert settings.EMAIL_BACKEND == "smtp"
