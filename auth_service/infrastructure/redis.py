"""
Redis Connection Module

This module builds the asynchronous Redis client used by the banned-token and
2FA code stores when STORE_BACKEND is "persistent".

**Security Note**: Use a `rediss://` URL (REDIS_SSL) when Redis is reached over
an untrusted network. The connection URL may contain a password and is never
logged.

Functions:
    create_redis_client: Builds a client from settings.
    close_redis_client: Closes a client at application shutdown.
"""

import logging

from redis.asyncio import Redis

from auth_service.core.config.settings import Settings

logger = logging.getLogger(__name__)


def create_redis_client(settings: Settings) -> Redis:
    """
    Creates an asynchronous Redis client.

    Responses are decoded to `str`, so the stores work with text keys and
    JSON values.

    Args:
        settings: Application settings carrying REDIS_URL.

    Returns:
        Redis: A client with a lazily opened connection pool.
    """
    redis = Redis.from_url(settings.REDIS_URL, encoding="utf-8", decode_responses=True)
    logger.debug("Redis client created")
    return redis


async def close_redis_client(redis: Redis) -> None:
    await redis.aclose()
    logger.debug("Redis connection closed")
