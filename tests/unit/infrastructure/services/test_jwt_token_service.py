"""Unit tests for JWTTokenService."""

from datetime import timedelta

import jwt
import pytest
from pydantic import SecretStr

from auth_service.core.exceptions import (
    InvalidTokenError,
    MalformedTokenError,
    TokenExpiredError,
    TokenSignatureError,
)
from auth_service.domain.value_objects import Email, Token
from auth_service.infrastructure.services.authentication import JWTTokenService

SECRET = "unit-test-secret-that-is-at-least-32-bytes"
JTI = "0b5e4f8a-6f0e-4c51-9a4e-1f2d3c4b5a69"


@pytest.fixture
def service() -> JWTTokenService:
    return JWTTokenService(secret=SecretStr(SECRET))


class TestJWTTokenService:
    def test_issue_then_verify(self, service):
        # Act
        token = service.issue(Email("a@b.com"))
        claims = service.verify(token)

        # Assert
        assert claims.subject == Email("a@b.com")
        assert claims.expires_at - claims.issued_at == timedelta(hours=24)

    def test_token_uses_hs256_and_expected_claims(self, service):
        token = service.issue(Email("a@b.com"))

        header = jwt.get_unverified_header(token.expose_secret())
        payload = jwt.decode(token.expose_secret(), SECRET, algorithms=["HS256"])

        assert header["alg"] == "HS256"
        assert set(payload) == {"sub", "iat", "exp", "jti"}
        assert payload["sub"] == "a@b.com"

    def test_custom_ttl(self):
        service = JWTTokenService(secret=SecretStr(SECRET), ttl=timedelta(minutes=5))

        claims = service.verify(service.issue(Email("a@b.com")))

        assert claims.expires_at - claims.issued_at == timedelta(minutes=5)

    def test_expired_token(self):
        service = JWTTokenService(secret=SecretStr(SECRET), ttl=timedelta(seconds=-10))
        token = service.issue(Email("a@b.com"))

        with pytest.raises(TokenExpiredError):
            service.verify(token)

    def test_token_from_other_secret(self, service):
        other = JWTTokenService(secret=SecretStr("another-secret-that-is-at-least-32-bytes"))
        token = other.issue(Email("a@b.com"))

        with pytest.raises(TokenSignatureError):
            service.verify(token)

    def test_garbage_token(self, service):
        with pytest.raises(MalformedTokenError):
            service.verify(Token("abc.def.ghi"))

    def test_missing_subject_claim(self, service):
        """Test that a correctly signed token without `sub` is rejected."""
        raw = jwt.encode(
            {"iat": 1, "exp": 9_999_999_999, "jti": JTI}, SECRET, algorithm="HS256"
        )

        with pytest.raises(MalformedTokenError):
            service.verify(Token(raw))

    def test_subject_that_is_not_an_email(self, service):
        raw = jwt.encode(
            {"sub": "not-an-email", "iat": 1, "exp": 9_999_999_999, "jti": JTI},
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(MalformedTokenError):
            service.verify(Token(raw))

    def test_all_failures_are_invalid_token_errors(self):
        for error in (MalformedTokenError, TokenExpiredError, TokenSignatureError):
            assert issubclass(error, InvalidTokenError)

    def test_empty_secret_rejected(self):
        with pytest.raises(ValueError):
            JWTTokenService(secret=SecretStr(""))

    def test_tokens_issued_in_the_same_second_differ(self, service):
        email = Email("a@b.com")

        first = service.issue(email)
        second = service.issue(email)

        assert first != second
        assert service.verify(first).token_id != service.verify(second).token_id

    def test_missing_token_id_claim(self, service):
        """Test that a correctly signed token without `jti` is rejected."""
        raw = jwt.encode(
            {"sub": "a@b.com", "iat": 1, "exp": 9_999_999_999}, SECRET, algorithm="HS256"
        )

        with pytest.raises(MalformedTokenError):
            service.verify(Token(raw))

    def test_token_id_that_is_not_a_uuid(self, service):
        raw = jwt.encode(
            {"sub": "a@b.com", "iat": 1, "exp": 9_999_999_999, "jti": "nope"},
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(MalformedTokenError):
            service.verify(Token(raw))
