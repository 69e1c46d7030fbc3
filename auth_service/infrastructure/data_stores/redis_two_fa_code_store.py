"""Redis implementation of the 2FA code store.

A challenge is stored as JSON under `two_fa_code:<email>` with an expiry, so
an abandoned challenge disappears on its own. `SET` replaces any earlier
challenge for the same email in a single command.
"""

import json
from datetime import timedelta
from typing import Tuple

from redis.asyncio import Redis
from redis.exceptions import RedisError
from structlog import get_logger

from auth_service.core.exceptions import TwoFACodeNotFoundError, UnexpectedError, ValidationError
from auth_service.domain.interfaces import ITwoFACodeStore
from auth_service.domain.value_objects import Email, LoginAttemptId, TwoFACode

logger = get_logger(__name__)

TWO_FA_CODE_KEY_PREFIX = "two_fa_code:"


class RedisTwoFACodeStore(ITwoFACodeStore):
    """Pending challenges as expiring Redis keys.

    Args:
        redis: Async Redis client with `decode_responses=True`.
        ttl: Lifetime of a challenge.
    """

    def __init__(self, redis: Redis, ttl: timedelta = timedelta(seconds=600)):
        self._redis = redis
        self._ttl_seconds = int(ttl.total_seconds())

    async def add_code(
        self, email: Email, login_attempt_id: LoginAttemptId, code: TwoFACode
    ) -> None:
        payload = json.dumps({"login_attempt_id": login_attempt_id.value, "code": code.value})
        try:
            await self._redis.set(_key(email), payload, ex=self._ttl_seconds)
        except RedisError as e:
            logger.error("Failed to store 2FA code", email=email.mask_for_logging(), error=str(e))
            raise UnexpectedError() from e

    async def remove_code(self, email: Email) -> None:
        try:
            await self._redis.delete(_key(email))
        except RedisError as e:
            logger.error("Failed to remove 2FA code", email=email.mask_for_logging(), error=str(e))
            raise UnexpectedError() from e

    async def get_code(self, email: Email) -> Tuple[LoginAttemptId, TwoFACode]:
        try:
            raw = await self._redis.get(_key(email))
        except RedisError as e:
            logger.error("Failed to read 2FA code", email=email.mask_for_logging(), error=str(e))
            raise UnexpectedError() from e
        if raw is None:
            raise TwoFACodeNotFoundError()
        try:
            data = json.loads(raw)
            return LoginAttemptId(data["login_attempt_id"]), TwoFACode(data["code"])
        except (ValueError, KeyError, TypeError, ValidationError) as e:
            logger.error("Stored 2FA code is unreadable", email=email.mask_for_logging())
            raise UnexpectedError() from e


def _key(email: Email) -> str:
    return f"{TWO_FA_CODE_KEY_PREFIX}{email.value}"
