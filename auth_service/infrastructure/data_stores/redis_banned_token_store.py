"""Redis implementation of the banned-token store.

Each banned token is a key `banned_token:<token>` that expires together with
the token itself, so Redis garbage-collects bans that no longer matter.
"""

from datetime import timedelta

from redis.asyncio import Redis
from redis.exceptions import RedisError
from structlog import get_logger

from auth_service.core.exceptions import UnexpectedError
from auth_service.domain.interfaces import IBannedTokenStore
from auth_service.domain.value_objects import Token

logger = get_logger(__name__)

BANNED_TOKEN_KEY_PREFIX = "banned_token:"


class RedisBannedTokenStore(IBannedTokenStore):
    """Banned tokens as expiring Redis keys.

    Args:
        redis: Async Redis client.
        ttl: Lifetime of a ban; set to the session token lifetime.
    """

    def __init__(self, redis: Redis, ttl: timedelta):
        self._redis = redis
        self._ttl_seconds = int(ttl.total_seconds())

    async def add_token(self, token: Token) -> None:
        try:
            await self._redis.set(_key(token), 1, ex=self._ttl_seconds)
        except RedisError as e:
            logger.error("Failed to ban token", token=token.mask_for_logging(), error=str(e))
            raise UnexpectedError() from e

    async def contains_token(self, token: Token) -> bool:
        try:
            return bool(await self._redis.exists(_key(token)))
        except RedisError as e:
            logger.error("Failed to check banned token", error=str(e))
            raise UnexpectedError() from e


def _key(token: Token) -> str:
    return f"{BANNED_TOKEN_KEY_PREFIX}{token.expose_secret()}"
