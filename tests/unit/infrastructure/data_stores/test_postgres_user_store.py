"""Unit tests for PostgresUserStore with a mocked session factory."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from auth_service.core.exceptions import (
    InvalidCredentialsError,
    PasswordMismatchError,
    UnexpectedError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from auth_service.domain.value_objects import Email, Password
from auth_service.infrastructure.data_stores import PostgresUserStore
from auth_service.infrastructure.database.models import UserRecord
from tests.factories.user import SAMPLE_HASH, build_user


@pytest.fixture
def mock_db_session():
    """Create a properly mocked async database session."""
    session = AsyncMock()
    session.add = MagicMock()
    session.commit = AsyncMock()
    session.get = AsyncMock(return_value=None)
    return session


@pytest.fixture
def session_factory(mock_db_session):
    factory = MagicMock()
    factory.return_value.__aenter__.return_value = mock_db_session
    factory.return_value.__aexit__.return_value = False
    return factory


@pytest.fixture
def hasher():
    return AsyncMock()


@pytest.fixture
def store(session_factory, hasher) -> PostgresUserStore:
    return PostgresUserStore(session_factory, hasher)


class TestPostgresUserStore:
    async def test_add_user_inserts_record(self, store, mock_db_session):
        # Arrange
        user = build_user("a@b.com", requires_2fa=True)

        # Act
        await store.add_user(user)

        # Assert
        record = mock_db_session.add.call_args.args[0]
        assert isinstance(record, UserRecord)
        assert record.email == "a@b.com"
        assert record.password_hash == SAMPLE_HASH
        assert record.requires_2fa is True
        mock_db_session.commit.assert_awaited_once()

    async def test_unique_violation_maps_to_already_exists(self, store, mock_db_session):
        mock_db_session.commit.side_effect = IntegrityError(
            "INSERT INTO users", {}, Exception("duplicate key value violates unique constraint")
        )

        with pytest.raises(UserAlreadyExistsError):
            await store.add_user(build_user("a@b.com"))

    async def test_other_database_errors_are_unexpected(self, store, mock_db_session):
        mock_db_session.commit.side_effect = OperationalError("INSERT", {}, Exception("gone"))

        with pytest.raises(UnexpectedError):
            await store.add_user(build_user("a@b.com"))

    async def test_get_user(self, store, mock_db_session):
        mock_db_session.get.return_value = UserRecord(
            email="a@b.com", password_hash=SAMPLE_HASH, requires_2fa=False
        )

        user = await store.get_user(Email("a@b.com"))

        assert user.email == Email("a@b.com")
        assert user.hashed_password.value == SAMPLE_HASH
        mock_db_session.get.assert_awaited_once_with(UserRecord, "a@b.com")

    async def test_get_missing_user(self, store):
        with pytest.raises(UserNotFoundError):
            await store.get_user(Email("a@b.com"))

    async def test_corrupt_row_is_unexpected(self, store, mock_db_session):
        mock_db_session.get.return_value = UserRecord(
            email="a@b.com", password_hash="not-a-hash", requires_2fa=False
        )

        with pytest.raises(UnexpectedError):
            await store.get_user(Email("a@b.com"))

    async def test_validate_user_missing_runs_dummy_verification(self, store, hasher):
        with pytest.raises(UserNotFoundError):
            await store.validate_user(Email("a@b.com"), Password("password123"))

        hasher.verify_dummy.assert_awaited_once()
        hasher.verify.assert_not_awaited()

    async def test_validate_user_wrong_password(self, store, hasher, mock_db_session):
        mock_db_session.get.return_value = UserRecord(
            email="a@b.com", password_hash=SAMPLE_HASH, requires_2fa=False
        )
        hasher.verify.side_effect = PasswordMismatchError()

        with pytest.raises(InvalidCredentialsError):
            await store.validate_user(Email("a@b.com"), Password("password123"))

    async def test_validate_user_success(self, store, hasher, mock_db_session):
        mock_db_session.get.return_value = UserRecord(
            email="a@b.com", password_hash=SAMPLE_HASH, requires_2fa=False
        )

        await store.validate_user(Email("a@b.com"), Password("password123"))

        hasher.verify.assert_awaited_once()
