"""Postgres implementation of the user store.

This module maps the `User` entity onto the `users` table through SQLModel
and an async SQLAlchemy session factory. A fresh session is opened per call;
each call is one statement or one short transaction, so concurrent callers
rely on Postgres for atomicity (the email primary key enforces uniqueness).

Error mapping:
- `IntegrityError` on insert -> `UserAlreadyExistsError`
- any other `SQLAlchemyError` -> `UnexpectedError`
- a stored hash that is not a valid argon2 string -> `UnexpectedError`
"""

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from structlog import get_logger

from auth_service.core.exceptions import (
    InvalidCredentialsError,
    PasswordMismatchError,
    UnexpectedError,
    UserAlreadyExistsError,
    UserNotFoundError,
    ValidationError,
)
from auth_service.domain.entities.user import User
from auth_service.domain.interfaces import IPasswordHasher, IUserStore
from auth_service.domain.value_objects import Email, HashedPassword, Password
from auth_service.infrastructure.database.models import UserRecord

logger = get_logger(__name__)


class PostgresUserStore(IUserStore):
    """SQLModel implementation of `IUserStore`.

    Args:
        session_factory: Factory producing `AsyncSession` objects.
        password_hasher: Hasher used by `validate_user`.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        password_hasher: IPasswordHasher,
    ):
        self._session_factory = session_factory
        self._password_hasher = password_hasher

    async def add_user(self, user: User) -> None:
        record = UserRecord(
            email=user.email.value,
            password_hash=user.hashed_password.value,
            requires_2fa=user.requires_2fa,
        )
        try:
            async with self._session_factory() as session:
                session.add(record)
                await session.commit()
        except IntegrityError as e:
            logger.info("Duplicate signup rejected", email=user.email.mask_for_logging())
            raise UserAlreadyExistsError() from e
        except SQLAlchemyError as e:
            logger.error("Failed to insert user", error=str(e))
            raise UnexpectedError() from e
        logger.debug("User stored", email=user.email.mask_for_logging())

    async def get_user(self, email: Email) -> User:
        record = await self._fetch(email)
        if record is None:
            raise UserNotFoundError()
        return self._to_entity(record)

    async def validate_user(self, email: Email, password: Password) -> None:
        record = await self._fetch(email)
        if record is None:
            await self._password_hasher.verify_dummy(password)
            raise UserNotFoundError()
        user = self._to_entity(record)
        try:
            await self._password_hasher.verify(user.hashed_password, password)
        except PasswordMismatchError as e:
            raise InvalidCredentialsError() from e

    async def _fetch(self, email: Email) -> UserRecord | None:
        try:
            async with self._session_factory() as session:
                return await session.get(UserRecord, email.value)
        except SQLAlchemyError as e:
            logger.error("Failed to read user", error=str(e))
            raise UnexpectedError() from e

    @staticmethod
    def _to_entity(record: UserRecord) -> User:
        try:
            return User(
                email=Email(record.email),
                hashed_password=HashedPassword(record.password_hash),
                requires_2fa=record.requires_2fa,
            )
        except ValidationError as e:
            logger.error("Stored user row is invalid")
            raise UnexpectedError() from e
