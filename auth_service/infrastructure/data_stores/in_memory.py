"""In-memory store adapters.

Each store owns its own `AsyncReadWriteLock`: lookups take the read side,
mutations take the write side. Stores never share a lock, so a write to the
banned-token set never blocks a user lookup.

State lives for the lifetime of the process and is not shared between
workers. Use the Postgres/Redis adapters when running more than one worker.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, Set, Tuple

from structlog import get_logger

from auth_service.core.exceptions import (
    InvalidCredentialsError,
    PasswordMismatchError,
    TwoFACodeNotFoundError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from auth_service.domain.entities.user import User
from auth_service.domain.interfaces import (
    IBannedTokenStore,
    IPasswordHasher,
    ITwoFACodeStore,
    IUserStore,
)
from auth_service.domain.value_objects import (
    Email,
    LoginAttemptId,
    Password,
    Token,
    TwoFACode,
)
from auth_service.infrastructure.concurrency import AsyncReadWriteLock

logger = get_logger(__name__)


class InMemoryUserStore(IUserStore):
    """User registry kept in a dict keyed by email."""

    def __init__(self, password_hasher: IPasswordHasher):
        self._users: Dict[Email, User] = {}
        self._lock = AsyncReadWriteLock()
        self._password_hasher = password_hasher

    async def add_user(self, user: User) -> None:
        async with self._lock.write():
            if user.email in self._users:
                raise UserAlreadyExistsError()
            self._users[user.email] = user
        logger.debug("User stored", email=user.email.mask_for_logging())

    async def get_user(self, email: Email) -> User:
        async with self._lock.read():
            user = self._users.get(email)
        if user is None:
            raise UserNotFoundError()
        return user

    async def validate_user(self, email: Email, password: Password) -> None:
        async with self._lock.read():
            user = self._users.get(email)
        if user is None:
            await self._password_hasher.verify_dummy(password)
            raise UserNotFoundError()
        try:
            await self._password_hasher.verify(user.hashed_password, password)
        except PasswordMismatchError as e:
            raise InvalidCredentialsError() from e


class InMemoryBannedTokenStore(IBannedTokenStore):
    """Banned tokens kept in a set. Entries are never evicted."""

    def __init__(self):
        self._tokens: Set[str] = set()
        self._lock = AsyncReadWriteLock()

    async def add_token(self, token: Token) -> None:
        async with self._lock.write():
            self._tokens.add(token.expose_secret())

    async def contains_token(self, token: Token) -> bool:
        async with self._lock.read():
            return token.expose_secret() in self._tokens


class InMemoryTwoFACodeStore(ITwoFACodeStore):
    """Pending 2FA challenges with a per-entry expiry instant.

    Args:
        ttl: How long a challenge stays valid after `add_code`.
    """

    def __init__(self, ttl: timedelta = timedelta(seconds=600)):
        self._codes: Dict[Email, Tuple[LoginAttemptId, TwoFACode, datetime]] = {}
        self._lock = AsyncReadWriteLock()
        self._ttl = ttl

    async def add_code(
        self, email: Email, login_attempt_id: LoginAttemptId, code: TwoFACode
    ) -> None:
        expires_at = datetime.now(timezone.utc) + self._ttl
        async with self._lock.write():
            self._codes[email] = (login_attempt_id, code, expires_at)

    async def remove_code(self, email: Email) -> None:
        async with self._lock.write():
            self._codes.pop(email, None)

    async def get_code(self, email: Email) -> Tuple[LoginAttemptId, TwoFACode]:
        async with self._lock.read():
            entry = self._codes.get(email)
        if entry is None:
            raise TwoFACodeNotFoundError()
        login_attempt_id, code, expires_at = entry
        if datetime.now(timezone.utc) >= expires_at:
            raise TwoFACodeNotFoundError()
        return login_attempt_id, code
