"""Unit tests for the Redis store adapters, against a mocked client."""

import json
from datetime import timedelta
from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from auth_service.core.exceptions import TwoFACodeNotFoundError, UnexpectedError
from auth_service.domain.value_objects import Email, LoginAttemptId, Token, TwoFACode
from auth_service.infrastructure.data_stores import RedisBannedTokenStore, RedisTwoFACodeStore


@pytest.fixture
def mock_redis_client():
    """Create a mocked Redis client."""
    redis = AsyncMock()
    redis.get = AsyncMock(return_value=None)
    redis.set = AsyncMock()
    redis.delete = AsyncMock()
    redis.exists = AsyncMock(return_value=0)
    return redis


class TestRedisBannedTokenStore:
    async def test_add_token_sets_expiring_key(self, mock_redis_client):
        # Arrange
        store = RedisBannedTokenStore(mock_redis_client, ttl=timedelta(hours=24))

        # Act
        await store.add_token(Token("a.b.c"))

        # Assert
        mock_redis_client.set.assert_awaited_once_with("banned_token:a.b.c", 1, ex=86400)

    async def test_contains_token(self, mock_redis_client):
        store = RedisBannedTokenStore(mock_redis_client, ttl=timedelta(hours=24))
        mock_redis_client.exists.return_value = 1

        assert await store.contains_token(Token("a.b.c")) is True
        mock_redis_client.exists.assert_awaited_once_with("banned_token:a.b.c")

    async def test_not_banned(self, mock_redis_client):
        store = RedisBannedTokenStore(mock_redis_client, ttl=timedelta(hours=24))

        assert await store.contains_token(Token("a.b.c")) is False

    async def test_redis_failure_is_unexpected(self, mock_redis_client):
        mock_redis_client.set.side_effect = RedisConnectionError("down")
        store = RedisBannedTokenStore(mock_redis_client, ttl=timedelta(hours=24))

        with pytest.raises(UnexpectedError):
            await store.add_token(Token("a.b.c"))


class TestRedisTwoFACodeStore:
    async def test_add_code_stores_json_with_ttl(self, mock_redis_client):
        # Arrange
        store = RedisTwoFACodeStore(mock_redis_client, ttl=timedelta(seconds=600))
        attempt_id = LoginAttemptId.generate()

        # Act
        await store.add_code(Email("a@b.com"), attempt_id, TwoFACode("123456"))

        # Assert
        key, payload = mock_redis_client.set.await_args.args
        assert key == "two_fa_code:a@b.com"
        assert json.loads(payload) == {"login_attempt_id": attempt_id.value, "code": "123456"}
        assert mock_redis_client.set.await_args.kwargs == {"ex": 600}

    async def test_get_code_round_trip(self, mock_redis_client):
        store = RedisTwoFACodeStore(mock_redis_client)
        attempt_id = LoginAttemptId.generate()
        mock_redis_client.get.return_value = json.dumps(
            {"login_attempt_id": attempt_id.value, "code": "654321"}
        )

        result = await store.get_code(Email("a@b.com"))

        assert result == (attempt_id, TwoFACode("654321"))
        mock_redis_client.get.assert_awaited_once_with("two_fa_code:a@b.com")

    async def test_missing_key(self, mock_redis_client):
        store = RedisTwoFACodeStore(mock_redis_client)

        with pytest.raises(TwoFACodeNotFoundError):
            await store.get_code(Email("a@b.com"))

    @pytest.mark.parametrize(
        "stored",
        [
            "not json",
            json.dumps({"code": "123456"}),
            json.dumps({"login_attempt_id": "nope", "code": "123456"}),
            json.dumps({"login_attempt_id": "7b0b6b8e-8f57-4c44-9d36-6f3f7f1b1a11", "code": "12"}),
            json.dumps(["a", "b"]),
        ],
    )
    async def test_unreadable_value_is_unexpected(self, mock_redis_client, stored):
        """Test that a stored value that fails to re-parse is a backend failure."""
        mock_redis_client.get.return_value = stored
        store = RedisTwoFACodeStore(mock_redis_client)

        with pytest.raises(UnexpectedError):
            await store.get_code(Email("a@b.com"))

    async def test_remove_code(self, mock_redis_client):
        store = RedisTwoFACodeStore(mock_redis_client)

        await store.remove_code(Email("a@b.com"))

        mock_redis_client.delete.assert_awaited_once_with("two_fa_code:a@b.com")
