"""Shared fixtures.

Hashing cost is reduced to the argon2 minimum so the suite stays fast; the
production parameters are covered separately in the hasher tests.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from pydantic import SecretStr

from auth_service.core.application import create_application
from auth_service.core.config.settings import Settings
from auth_service.domain.services.authentication import AuthenticationOrchestrator
from auth_service.infrastructure.data_stores import (
    InMemoryBannedTokenStore,
    InMemoryTwoFACodeStore,
    InMemoryUserStore,
)
from auth_service.infrastructure.services.authentication import (
    Argon2PasswordHasher,
    JWTTokenService,
)
from auth_service.infrastructure.services.email import MockEmailClient

TEST_JWT_SECRET = "test-secret-that-is-at-least-32-bytes-long"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        APP_ENV="test",
        JWT_SECRET=SecretStr(TEST_JWT_SECRET),
        ARGON2_TIME_COST=1,
        ARGON2_MEMORY_COST=8,
        ARGON2_PARALLELISM=1,
        PASSWORD_HASHER_WORKERS=2,
        STORE_BACKEND="memory",
        EMAIL_BACKEND="mock",
        LOG_JSON=False,
    )


@pytest.fixture
def password_hasher():
    hasher = Argon2PasswordHasher(time_cost=1, memory_cost=8, parallelism=1, max_workers=2)
    yield hasher
    hasher.shutdown()


@pytest.fixture
def token_service() -> JWTTokenService:
    return JWTTokenService(secret=SecretStr(TEST_JWT_SECRET))


@pytest.fixture
def user_store(password_hasher) -> InMemoryUserStore:
    return InMemoryUserStore(password_hasher)


@pytest.fixture
def banned_token_store() -> InMemoryBannedTokenStore:
    return InMemoryBannedTokenStore()


@pytest.fixture
def two_fa_code_store() -> InMemoryTwoFACodeStore:
    return InMemoryTwoFACodeStore()


@pytest.fixture
def email_client() -> MockEmailClient:
    return MockEmailClient()


@pytest.fixture
def orchestrator(
    user_store, banned_token_store, two_fa_code_store, password_hasher, token_service, email_client
) -> AuthenticationOrchestrator:
    return AuthenticationOrchestrator(
        user_store=user_store,
        banned_token_store=banned_token_store,
        two_fa_code_store=two_fa_code_store,
        password_hasher=password_hasher,
        token_service=token_service,
        email_client=email_client,
    )


@pytest.fixture
def app(settings):
    return create_application(settings)


@pytest_asyncio.fixture
async def client(app):
    """HTTP client bound to the app, with startup and shutdown run around it."""
    async with app.router.lifespan_context(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
            yield ac
