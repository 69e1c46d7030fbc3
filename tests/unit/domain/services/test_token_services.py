"""Unit tests for UserLogoutService and TokenVerificationService."""

from datetime import timedelta
from unittest.mock import AsyncMock

import pytest
from pydantic import SecretStr

from auth_service.core.exceptions import (
    InvalidTokenError,
    MalformedTokenError,
    TokenAlreadyBannedError,
    TokenExpiredError,
    TokenRevokedError,
)
from auth_service.domain.services.authentication import (
    TokenVerificationService,
    UserLogoutService,
)
from auth_service.domain.value_objects import Email
from auth_service.infrastructure.services.authentication import JWTTokenService


@pytest.fixture
def logout_service(banned_token_store, token_service):
    return UserLogoutService(banned_token_store, token_service)


@pytest.fixture
def verification_service(banned_token_store, token_service):
    return TokenVerificationService(banned_token_store, token_service)


class TestUserLogoutService:
    async def test_logout_bans_token(self, logout_service, token_service, banned_token_store):
        token = token_service.issue(Email("a@b.com"))

        await logout_service.logout(token.expose_secret())

        assert await banned_token_store.contains_token(token)

    async def test_double_logout_succeeds(self, logout_service, token_service):
        token = token_service.issue(Email("a@b.com"))

        await logout_service.logout(token.expose_secret())
        await logout_service.logout(token.expose_secret())

    async def test_store_reporting_already_banned_is_tolerated(self, token_service):
        store = AsyncMock()
        store.add_token.side_effect = TokenAlreadyBannedError()
        service = UserLogoutService(store, token_service)

        await service.logout(token_service.issue(Email("a@b.com")).expose_secret())

    async def test_malformed_token(self, logout_service):
        with pytest.raises(MalformedTokenError):
            await logout_service.logout("not-a-jwt")

    async def test_expired_token_cannot_be_banned(self, banned_token_store):
        expired = JWTTokenService(
            secret=SecretStr("test-secret-that-is-at-least-32-bytes-long"),
            ttl=timedelta(seconds=-10),
        )
        service = UserLogoutService(banned_token_store, expired)

        with pytest.raises(TokenExpiredError):
            await service.logout(expired.issue(Email("a@b.com")).expose_secret())


class TestTokenVerificationService:
    async def test_valid_token(self, verification_service, token_service):
        token = token_service.issue(Email("a@b.com"))

        claims = await verification_service.verify_token(token.expose_secret())

        assert claims.subject == Email("a@b.com")

    async def test_banned_token_rejected(
        self, verification_service, token_service, banned_token_store
    ):
        token = token_service.issue(Email("a@b.com"))
        await banned_token_store.add_token(token)

        with pytest.raises(TokenRevokedError):
            await verification_service.verify_token(token.expose_secret())

    async def test_ban_check_precedes_signature_check(self):
        """Test that a banned token is reported revoked without consulting the signer."""
        # Arrange
        signer = AsyncMock()
        store = AsyncMock()
        store.contains_token.return_value = True
        service = TokenVerificationService(store, signer)

        # Act & Assert
        with pytest.raises(TokenRevokedError):
            await service.verify_token("a.b.c")
        signer.verify.assert_not_called()

    async def test_malformed_token(self, verification_service):
        with pytest.raises(InvalidTokenError):
            await verification_service.verify_token("garbage")


class TestLogoutIsolatesSessions:
    async def test_login_after_logout_issues_a_live_token(self, orchestrator):
        # Arrange
        await orchestrator.signup("a@b.com", "password123", False)
        first = (await orchestrator.login("a@b.com", "password123")).token
        await orchestrator.logout(first.expose_secret())

        # Act
        second = (await orchestrator.login("a@b.com", "password123")).token

        # Assert
        claims = await orchestrator.verify_token(second.expose_secret())
        assert claims.subject == Email("a@b.com")
        with pytest.raises(TokenRevokedError):
            await orchestrator.verify_token(first.expose_secret())

    async def test_logout_leaves_other_sessions_valid(self, orchestrator):
        await orchestrator.signup("a@b.com", "password123", False)
        laptop = (await orchestrator.login("a@b.com", "password123")).token
        phone = (await orchestrator.login("a@b.com", "password123")).token

        await orchestrator.logout(laptop.expose_secret())

        claims = await orchestrator.verify_token(phone.expose_secret())
        assert claims.subject == Email("a@b.com")
