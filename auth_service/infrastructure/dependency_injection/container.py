"""Composition root for the authentication services.

This module wires concrete adapters to the domain interfaces, driven by
settings:

- STORE_BACKEND="memory": in-memory user, banned-token and 2FA code stores.
- STORE_BACKEND="persistent": Postgres user store, Redis banned-token and
  2FA code stores.
- EMAIL_BACKEND="mock" or "smtp" selects the email client.

The token service and the password hasher receive their secret and cost
parameters here; nothing in the domain reads settings.
"""

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Optional

from redis.asyncio import Redis
from sqlalchemy.ext.asyncio import AsyncEngine
from structlog import get_logger

from auth_service.core.config.settings import Settings
from auth_service.domain.interfaces import (
    IBannedTokenStore,
    IEmailClient,
    ITokenService,
    ITwoFACodeStore,
    IUserStore,
)
from auth_service.domain.services.authentication import AuthenticationOrchestrator
from auth_service.infrastructure.data_stores import (
    InMemoryBannedTokenStore,
    InMemoryTwoFACodeStore,
    InMemoryUserStore,
    PostgresUserStore,
    RedisBannedTokenStore,
    RedisTwoFACodeStore,
)
from auth_service.infrastructure.database import create_engine, create_session_factory
from auth_service.infrastructure.redis import close_redis_client, create_redis_client
from auth_service.infrastructure.services.authentication import (
    Argon2PasswordHasher,
    JWTTokenService,
)
from auth_service.infrastructure.services.email import FastMailEmailClient, MockEmailClient

logger = get_logger(__name__)


@dataclass
class AuthContainer:
    """Holds every long-lived collaborator of the service.

    Attributes:
        orchestrator: The facade the HTTP routes call.
        password_hasher: Owns the hashing thread pool.
        token_service: Session token signer.
        user_store, banned_token_store, two_fa_code_store: The wired stores.
        email_client: Delivery channel for 2FA codes.
        redis: Redis client when running with persistent stores.
        engine: Database engine when running with persistent stores.
    """

    orchestrator: AuthenticationOrchestrator
    password_hasher: Argon2PasswordHasher
    token_service: ITokenService
    user_store: IUserStore
    banned_token_store: IBannedTokenStore
    two_fa_code_store: ITwoFACodeStore
    email_client: IEmailClient
    redis: Optional[Redis] = field(default=None)
    engine: Optional[AsyncEngine] = field(default=None)

    async def close(self) -> None:
        """Releases the Redis client, the database engine and the hashing pool."""
        if self.redis is not None:
            await close_redis_client(self.redis)
        if self.engine is not None:
            await self.engine.dispose()
        self.password_hasher.shutdown()
        logger.info("Auth container closed")


def build_password_hasher(settings: Settings) -> Argon2PasswordHasher:
    return Argon2PasswordHasher(
        time_cost=settings.ARGON2_TIME_COST,
        memory_cost=settings.ARGON2_MEMORY_COST,
        parallelism=settings.ARGON2_PARALLELISM,
        max_workers=settings.PASSWORD_HASHER_WORKERS,
    )


def build_token_service(settings: Settings) -> JWTTokenService:
    return JWTTokenService(
        secret=settings.JWT_SECRET,
        ttl=timedelta(hours=settings.TOKEN_TTL_HOURS),
        algorithm=settings.JWT_ALGORITHM,
    )


def build_email_client(settings: Settings) -> IEmailClient:
    if settings.EMAIL_BACKEND == "smtp":
        return FastMailEmailClient.from_settings(settings)
    return MockEmailClient()


def build_container(settings: Settings) -> AuthContainer:
    """Builds the container for the configured backends.

    Connections to Postgres and Redis are opened lazily on first use.

    Args:
        settings: Application settings.

    Returns:
        AuthContainer: The wired collaborators.
    """
    password_hasher = build_password_hasher(settings)
    token_service = build_token_service(settings)
    email_client = build_email_client(settings)
    code_ttl = timedelta(seconds=settings.TWO_FA_CODE_TTL_SECONDS)

    redis: Optional[Redis] = None
    engine: Optional[AsyncEngine] = None
    if settings.STORE_BACKEND == "persistent":
        engine = create_engine(settings)
        redis = create_redis_client(settings)
        user_store: IUserStore = PostgresUserStore(create_session_factory(engine), password_hasher)
        banned_token_store: IBannedTokenStore = RedisBannedTokenStore(redis, token_service.ttl)
        two_fa_code_store: ITwoFACodeStore = RedisTwoFACodeStore(redis, code_ttl)
    else:
        user_store = InMemoryUserStore(password_hasher)
        banned_token_store = InMemoryBannedTokenStore()
        two_fa_code_store = InMemoryTwoFACodeStore(code_ttl)

    orchestrator = AuthenticationOrchestrator(
        user_store=user_store,
        banned_token_store=banned_token_store,
        two_fa_code_store=two_fa_code_store,
        password_hasher=password_hasher,
        token_service=token_service,
        email_client=email_client,
    )
    logger.info(
        "Auth container built",
        store_backend=settings.STORE_BACKEND,
        email_backend=settings.EMAIL_BACKEND,
    )
    return AuthContainer(
        orchestrator=orchestrator,
        password_hasher=password_hasher,
        token_service=token_service,
        user_store=user_store,
        banned_token_store=banned_token_store,
        two_fa_code_store=two_fa_code_store,
        email_client=email_client,
        redis=redis,
        engine=engine,
    )
