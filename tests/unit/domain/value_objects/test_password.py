"""Unit tests for Password and HashedPassword value objects."""

import pytest
from pydantic import SecretStr

from auth_service.core.exceptions import ValidationError
from auth_service.domain.value_objects import HashedPassword, Password


class TestPassword:
    """Test cases for Password value object."""

    @pytest.mark.parametrize("raw", ["", "short", "1234567"])
    def test_password_too_short(self, raw):
        """Test password length validation - fewer than 8 characters."""
        with pytest.raises(ValidationError, match="at least 8 characters"):
            Password.parse(raw)

    @pytest.mark.parametrize("raw", ["12345678", "password", "a much longer pass phrase"])
    def test_valid_password(self, raw):
        # Act
        password = Password.parse(raw)

        # Assert
        assert password.expose_secret() == raw

    def test_secret_not_exposed_by_repr_or_str(self):
        """Test that the raw value never appears in str() or repr()."""
        # Arrange
        password = Password.parse("super-secret-value")

        # Assert
        assert "super-secret-value" not in str(password)
        assert "super-secret-value" not in repr(password)

    def test_accepts_secret_str(self):
        password = Password(SecretStr("12345678"))

        assert password.expose_secret() == "12345678"

    def test_password_immutability(self):
        password = Password.parse("12345678")

        with pytest.raises(AttributeError):
            password.value = SecretStr("other-value")  # type: ignore[misc]


class TestHashedPassword:
    def test_accepts_argon2_phc_string(self):
        hashed = HashedPassword("$argon2id$v=19$m=8,t=1,p=1$c2FsdHNhbHQ$aGFzaA")

        assert str(hashed).startswith("$argon2id$")

    @pytest.mark.parametrize("raw", ["", "plaintext", "$2b$12$bcrypthash"])
    def test_rejects_non_argon2_values(self, raw):
        with pytest.raises(ValidationError):
            HashedPassword(raw)
